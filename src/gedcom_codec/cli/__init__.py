from gedcom_codec.cli.app import app, main

__all__ = ["app", "main"]
