"""
sales_summary.reporting — rendering and writing the sales summary.

Modules:
  formatters — currency formatting and the fixed-layout summary text.
  export     — writing the summary to disk.
"""
