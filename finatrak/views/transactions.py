"""
Blueprint des transactions : liste filtrée, saisie, modification, export
"""
from flask import Blueprint, render_template, request, redirect, url_for, flash, send_file, g
from finatrak.services.transactions.transactions_service import TransactionsService
from finatrak.services.transactions.export_service import export_transactions_xlsx
from finatrak.services.categories.categories_service import CategoriesService
from finatrak.services.objectifs.objectifs_service import ObjectifsService
from finatrak.services.budget.budget_service import BudgetService
from finatrak.utils import donnees_formulaire
from datetime import date

transactions_bp = Blueprint('transactions', __name__)

CHAMPS = ['montant', 'type', 'categorie_id', 'description', 'date']


@transactions_bp.route('')
def index():
    """Liste des transactions du compte actif"""
    service = TransactionsService(g.user_id)
    filtres = service.parse_filters(request.args)
    transactions = service.fetch_all_transactions(g.compte_id, filtres)

    revenus = sum(t.montant for t in transactions if t.type == 'revenu')
    depenses = sum(t.montant for t in transactions if t.type == 'depense')

    return render_template(
        'transactions.html',
        transactions=transactions,
        filtres=filtres,
        totaux={'revenus': revenus, 'depenses': depenses, 'solde': revenus - depenses},
        categories=CategoriesService(g.user_id).fetch_categories(),
        objectifs=ObjectifsService(g.user_id).fetch_objectifs(g.compte_id),
        budget_items=BudgetService(g.user_id).fetch_budget_items(g.compte_id),
        aujourd_hui=date.today(),
    )


@transactions_bp.route('/ajouter', methods=['POST'])
def ajouter():
    """Ajoute une transaction sur le compte actif"""
    donnees = donnees_formulaire(request.form, CHAMPS + ['objectif_id', 'budget_item_id'])
    donnees['compte_id'] = g.compte_id

    success, message, objectif_updated = TransactionsService(g.user_id).insert_transaction(donnees)
    flash(message, 'success' if success else 'error')
    if objectif_updated:
        flash("Progression de l'objectif mise à jour", 'info')
    return redirect(url_for('transactions.index'))


@transactions_bp.route('/<transaction_id>/modifier', methods=['POST'])
def modifier(transaction_id):
    donnees = donnees_formulaire(request.form, CHAMPS)
    donnees['id'] = transaction_id

    success, message = TransactionsService(g.user_id).update_transaction(donnees)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('transactions.index'))


@transactions_bp.route('/<transaction_id>/supprimer', methods=['POST'])
def supprimer(transaction_id):
    success, message = TransactionsService(g.user_id).delete_transaction(transaction_id)
    flash(message, 'success' if success else 'error')
    return redirect(url_for('transactions.index'))


@transactions_bp.route('/export')
def export():
    """Export xlsx de la liste filtrée"""
    service = TransactionsService(g.user_id)
    transactions = service.fetch_all_transactions(g.compte_id, service.parse_filters(request.args))
    buffer = export_transactions_xlsx(transactions, g.compte.nom)
    return send_file(
        buffer,
        as_attachment=True,
        download_name=f"transactions_{date.today().isoformat()}.xlsx",
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    )
