"""Blueprints de l'application"""
