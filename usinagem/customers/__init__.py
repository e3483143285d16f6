"""
Module Customers - Comptes clients (création et suppression)
"""
