"""One-time passwords sent over different channels and checked the same way."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable

Reader = Callable[[str], str]
Log = Callable[[str], object]


class OTP(ABC):
    """A one-time code delivered through some channel."""

    def __init__(self, rng: random.Random | None = None, read: Reader = input) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.read = read
        self.code: int | None = None

    @property
    @abstractmethod
    def channel(self) -> str:
        """Name of the delivery channel."""

    def generate(self, digits: int) -> None:
        """Generate and keep a code of at most the given number of digits."""
        if digits < 0:
            raise ValueError("digits must not be negative")
        self.code = self.rng.randrange(10**digits)

    def _require_code(self) -> int:
        if self.code is None:
            raise RuntimeError("generate() must be called first")
        return self.code

    def send(self) -> str:
        return f"Send message OTP to {self.channel}: {self._require_code()}"

    def enter(self) -> bool:
        """Ask for the code and compare it with the stored one."""
        code = self._require_code()
        try:
            entered = int(self.read("Enter OTP:").strip())
        except ValueError:
            return False
        return entered == code


class EmailOTP(OTP):
    @property
    def channel(self) -> str:
        return "email"


class SMSOTP(OTP):
    @property
    def channel(self) -> str:
        return "SMS"


class OTPVerifier:
    """Runs the fixed generate, send and check sequence."""

    def __init__(self, otp: OTP, log: Log = print) -> None:
        self.otp = otp
        self.log = log

    def get_and_check(self, digits: int) -> bool:
        self.otp.generate(digits)
        self.log(self.otp.send())
        accepted = self.otp.enter()
        self.log("succesful" if accepted else "unsuccesful")
        return accepted


def main(argv: list[str] | None = None) -> int:
    """Send a four-digit code by SMS and check what the user types."""
    accepted = OTPVerifier(SMSOTP()).get_and_check(4)
    return 0 if accepted else 1