"""ledgerkeeper - account balance reconciliation."""

__version__ = "1.0.0"


# Import main lazily so importing the domain or web layers never pulls in click
def __getattr__(name):
    if name == "main":
        from ledgerkeeper.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
