"""
Repository Package

Data access layer. Interfaces live in ``postgre.interfaces``; the
SQLAlchemy implementations in ``postgre.implementations``.
"""
