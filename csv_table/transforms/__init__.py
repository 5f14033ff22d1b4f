"""
Transforms sub-package for csv-table.

Field-level value transforms applied by the parser while a field is
finalized:

- types.py: scalar type inference for the ``typed`` parse option.
"""
