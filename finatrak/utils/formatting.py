from flask import current_app


def _to_float(value):
    try:
        return 0.0 if value is None else float(value)
    except (TypeError, ValueError):
        try:
            return float(str(value).replace(',', '.'))
        except ValueError:
            return 0.0


def format_number(value, decimals=2):
    """Formate un nombre à la française : ``1 234,56`` (espace insécable)"""
    v = _to_float(value)
    texte = f"{v:,.{decimals}f}"
    return texte.replace(',', '\u00a0').replace('.', ',')


def format_currency(value, fmt=None):
    """Formate un montant avec le format défini par `FORMAT_DEVISE`"""
    if fmt is None:
        try:
            fmt = current_app.config.get('FORMAT_DEVISE', '{} €')
        except RuntimeError:
            # hors contexte d'application
            fmt = '{} €'
    return fmt.format(format_number(value))


def format_decimal(value, decimals=2):
    """Valeur décimale brute (``123.45``) pour les attributs data-* et le JS"""
    return f"{_to_float(value):.{int(decimals)}f}"


def format_date(date_obj, format_string="%d/%m/%Y"):
    """Formate une date ; les chaînes sont rendues telles quelles"""
    if date_obj is None:
        return ''
    if isinstance(date_obj, str):
        return date_obj
    return date_obj.strftime(format_string)


def format_percent(value, decimals=1):
    return f"{format_number(value, decimals)} %"
