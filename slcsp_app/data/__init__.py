"""
CSV record reading and canonical data models.
"""
