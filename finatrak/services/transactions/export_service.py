"""Export des transactions au format Excel"""
from finatrak.defaults import CATEGORIE_AUTRES
import io
import logging
import openpyxl
from openpyxl.styles import Font

logger = logging.getLogger(__name__)

ENTETES = ['Date', 'Type', 'Catégorie', 'Description', 'Montant']


def export_transactions_xlsx(transactions, nom_compte=''):
    """Écrit les transactions dans un classeur xlsx en mémoire.

    Les dépenses sont exportées avec un montant négatif pour que la somme de
    la colonne donne directement le solde net. Retourne un ``BytesIO``
    positionné au début.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = (nom_compte or 'Transactions')[:31]

    for i, h in enumerate(ENTETES, 1):
        cell = ws.cell(row=1, column=i, value=h)
        cell.font = Font(bold=True)

    for r_idx, t in enumerate(transactions, 2):
        ws.cell(row=r_idx, column=1, value=t.date).number_format = 'DD/MM/YYYY'
        ws.cell(row=r_idx, column=2, value='Revenu' if t.type == 'revenu' else 'Dépense')
        ws.cell(row=r_idx, column=3, value=t.categorie.nom if t.categorie else CATEGORIE_AUTRES)
        ws.cell(row=r_idx, column=4, value=t.description or '')
        ws.cell(row=r_idx, column=5, value=t.montant_signe).number_format = '#,##0.00'

    ws.column_dimensions['A'].width = 12
    ws.column_dimensions['C'].width = 18
    ws.column_dimensions['D'].width = 40
    ws.column_dimensions['E'].width = 14

    buffer = io.BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    logger.debug("Export xlsx: %d transactions", len(transactions))
    return buffer
