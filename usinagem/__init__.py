"""
usinagem - API de gestion d'atelier d'usinage (devis, commandes, historique).
"""
