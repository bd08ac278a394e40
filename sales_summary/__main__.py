"""Allow ``python -m sales_summary``."""

from sales_summary.cli import app

if __name__ == "__main__":
    app(prog_name="sales-summary")
