"""A wallet facade over account, code, balance and notification parts."""

from __future__ import annotations

import sys
from collections.abc import Callable


class WalletError(Exception):
    """Raised when an account, code or balance check fails."""


class Account:
    def __init__(self, name: str) -> None:
        self.name = name

    def check(self, name: str) -> str:
        if name != self.name:
            raise WalletError("Error")
        return f"Hi {self.name}"


class Code:
    def __init__(self, code: int) -> None:
        self.code = code

    def check(self, code: int) -> str:
        if code != self.code:
            raise WalletError("Error")
        return "Pass succesful"


class UserWallet:
    def __init__(self, credit: int) -> None:
        self.credit = credit

    def increase(self, amount: int) -> None:
        self.credit += amount

    def decrease(self, amount: int) -> None:
        if amount > self.credit:
            raise WalletError("Error")
        self.credit -= amount


class Notifier:
    def notify_increase(self, amount: int) -> str:
        return f"Wallet increase {amount}"

    def notify_decrease(self, amount: int) -> str:
        return f"Wallet decrease {amount}"


class Wallet:
    """One entry point for checking credentials and moving money."""

    def __init__(
        self,
        name: str,
        code: int,
        credit: int,
        log: Callable[[str], object] = print,
    ) -> None:
        self.account = Account(name)
        self.code = Code(code)
        self.wallet = UserWallet(credit)
        self.notifier = Notifier()
        self.log = log

    def _authorise(self, name: str, code: int) -> None:
        self.log(self.account.check(name))
        self.log(self.code.check(code))

    def send_money(self, name: str, code: int, money: int) -> None:
        self._authorise(name, code)
        self.wallet.increase(money)
        self.log(self.notifier.notify_increase(money))

    def get_money(self, name: str, code: int, money: int) -> None:
        self._authorise(name, code)
        self.wallet.decrease(money)
        self.log(self.notifier.notify_decrease(money))


def main(argv: list[str] | None = None) -> int:
    """Withdraw twice; the second withdrawal exceeds the balance."""
    wallet = Wallet("No name", 1111, 100000)
    try:
        wallet.get_money("No name", 1111, 50000)
        wallet.get_money("No name", 1111, 60000)
    except WalletError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0