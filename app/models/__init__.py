from app.models.receipt import Item, Receipt, ScoredReceipt

__all__ = [
    "Item",
    "Receipt",
    "ScoredReceipt",
]
