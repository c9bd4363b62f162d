from app.store.memory import InMemoryReceiptStore, ReceiptStore, get_receipt_store

__all__ = ["InMemoryReceiptStore", "ReceiptStore", "get_receipt_store"]
