"""
Core Module
============

Base classes for the persistence layer:
- base_model: SQLAlchemy base model with save/delete/as_dict helpers
"""
