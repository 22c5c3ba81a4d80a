"""Assessment solutions packaged as importable, tested modules."""
