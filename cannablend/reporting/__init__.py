"""
Reporting: plain-text rendering of predictions and reference data.

Modules
-------
formatters : format_prediction() + format_strain_table() +
             format_compound_table(): ASCII only, no I/O.
"""
