import enum
import logging
from dataclasses import dataclass
from typing import Optional

from mongodb_isolation.models import Account

logger = logging.getLogger(__name__)

ACCOUNT_ID = 1
AMOUNT = -100


class IsolationState(enum.Enum):
    NOT_STARTED = "not_started"
    IN_TRANSACTION = "in_transaction"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass
class IsolationReport:
    state: IsolationState = IsolationState.NOT_STARTED
    other_session_balance: Optional[int] = None
    after_commit_balance: Optional[int] = None
    error: Optional[str] = None


def _balance(doc: Optional[dict]) -> Optional[int]:
    return Account.from_document(doc).balance if doc is not None else None


def _format(balance: Optional[int]) -> str:
    return "" if balance is None else str(balance)


async def probe_isolation_level(client, coll) -> IsolationReport:
    """Write to account 1 inside a transaction and read it from a second session.

    Under MongoDB's snapshot isolation the second session sees the balance as
    it was before the transaction. After the commit, an unscoped read sees the
    decremented balance.

    Any error raised while probing is printed and the transaction is aborted
    if it is still open. Nothing is re-raised.
    """
    report = IsolationReport()
    account_filter = {"_id": ACCOUNT_ID}

    async with await client.start_session() as session:
        try:
            session.start_transaction()
            report.state = IsolationState.IN_TRANSACTION
            print("Transaction started...")

            await coll.update_one(
                account_filter, {"$inc": {"balance": AMOUNT}}, session=session
            )
            print("Updated Account 1 balance within transaction.")

            async with await client.start_session() as other_session:
                doc = await coll.find_one(account_filter, session=other_session)
            report.other_session_balance = _balance(doc)
            print(
                "Other session read (before commit): "
                f"AccountId={ACCOUNT_ID}, Balance={_format(report.other_session_balance)}"
            )

            await session.commit_transaction()
            report.state = IsolationState.COMMITTED
            print("Transaction committed.")

            doc = await coll.find_one(account_filter)
            report.after_commit_balance = _balance(doc)
            print(
                "After commit read: "
                f"AccountId={ACCOUNT_ID}, Balance={_format(report.after_commit_balance)}"
            )
        except Exception as e:
            logger.debug("Transaction body failed", exc_info=True)
            report.error = str(e)
            print(f"Error during transaction: {e}")
            if session.in_transaction:
                await session.abort_transaction()
            # A failed commit also ends the transaction without applying it.
            if report.state is IsolationState.IN_TRANSACTION:
                report.state = IsolationState.ABORTED

    logger.debug("Isolation probe finished in state %s", report.state.name)
    return report
