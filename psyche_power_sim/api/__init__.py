"""FastAPI surface for the power system simulator."""
