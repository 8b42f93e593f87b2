"""
Data layer for goalscope.

Includes:
- Raw goal table schema and validation (`schema`)
- Loading utilities (`data_loader`)
"""
