import random

import pytest

from patternkit.template_method import EmailOTP, OTPVerifier, SMSOTP


def test_correct_code_is_accepted():
    prompts = []
    logs = []

    def read(prompt):
        prompts.append(prompt)
        return str(sms.code)

    sms = SMSOTP(rng=random.Random(1), read=read)
    assert OTPVerifier(sms, log=logs.append).get_and_check(4) is True
    assert prompts == ["Enter OTP:"]
    assert logs == [f"Send message OTP to SMS: {sms.code}", "succesful"]


def test_wrong_code_is_rejected():
    logs = []
    email = EmailOTP(rng=random.Random(2), read=lambda prompt: str(email.code + 1))
    assert OTPVerifier(email, log=logs.append).get_and_check(4) is False
    assert logs[0].startswith("Send message OTP to email: ")
    assert logs[-1] == "unsuccesful"


def test_non_numeric_entry_is_rejected():
    sms = SMSOTP(rng=random.Random(3), read=lambda prompt: "abc")
    sms.generate(4)
    assert sms.enter() is False


def test_code_fits_digit_count():
    sms = SMSOTP(rng=random.Random(4))
    for digits in range(1, 7):
        sms.generate(digits)
        assert 0 <= sms.code < 10**digits


def test_zero_digits_gives_zero():
    sms = SMSOTP(rng=random.Random(5))
    sms.generate(0)
    assert sms.code == 0


def test_negative_digits_rejected():
    with pytest.raises(ValueError):
        SMSOTP().generate(-1)


def test_send_before_generate_raises():
    with pytest.raises(RuntimeError):
        EmailOTP().send()