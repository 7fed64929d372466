"""invoicekit - validated invoice records for billing applications."""

__version__ = "0.1.0"


# The CLI pulls in click; keep it out of plain domain imports
def __getattr__(name):
    if name == "main":
        from invoicekit.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
