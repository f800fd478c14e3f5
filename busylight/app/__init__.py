"""Host-facing wiring: the key action adapter and the command line runner."""
