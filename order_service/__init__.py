"""
Order Service - orders and their line items for the LUGX game shop
"""
