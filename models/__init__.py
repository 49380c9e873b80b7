from models.application import Application, Fund, Product

__all__ = [
    "Application",
    "Fund",
    "Product",
]
