from transactions.stores.django_store import DjangoTransactionStore
from transactions.stores.interfaces import TransactionStore

__all__ = ["TransactionStore", "DjangoTransactionStore"]
