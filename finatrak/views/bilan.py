"""Blueprint du bilan sur douze mois"""
from flask import Blueprint, render_template, g
from finatrak.services.bilan.bilan_service import BilanService

bilan_bp = Blueprint('bilan', __name__)


@bilan_bp.route('')
def index():
    return render_template('bilan.html', bilan=BilanService(g.user_id).fetch_bilan_data(g.compte_id))
