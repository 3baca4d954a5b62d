"""Blueprint du tableau de bord"""
from flask import Blueprint, render_template, redirect, url_for, jsonify, g
from finatrak.services.dashboard.dashboard_service import DashboardService
from finatrak.services import label_mois_long
from datetime import date

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/')
def home():
    return redirect(url_for('dashboard.index'))


@dashboard_bp.route('/dashboard')
def index():
    """Tableau de bord du compte actif"""
    service = DashboardService(g.user_id)
    return render_template(
        'dashboard.html',
        mois_courant=label_mois_long(date.today()),
        stats=service.fetch_dashboard_stats(g.compte_id),
        transactions=service.fetch_recent_transactions(g.compte_id),
        depenses_categories=service.fetch_depenses_par_categorie(g.compte_id),
        historique=service.fetch_balance_history(g.compte_id),
    )


@dashboard_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})
