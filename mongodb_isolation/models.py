from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    id: int
    balance: int

    def to_document(self) -> dict:
        return {"_id": self.id, "balance": self.balance}

    @classmethod
    def from_document(cls, doc: dict) -> "Account":
        return cls(id=doc["_id"], balance=doc["balance"])


BASELINE_ACCOUNTS = (
    Account(id=1, balance=1000),
    Account(id=2, balance=500),
)
