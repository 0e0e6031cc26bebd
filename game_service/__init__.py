"""
Game Service - game catalog for the LUGX game shop
"""
