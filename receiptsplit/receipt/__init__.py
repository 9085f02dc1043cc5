"""Receipt text parsing, structured responses and display formatting."""
