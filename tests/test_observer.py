from patternkit.observer import Customer, Item, main


def test_in_stock_notifies_in_registration_order():
    item = Item("Adidas shoe", True)
    item.register(Customer("Dan"))
    item.register(Customer("Bronya"))
    assert item.check() == ["Given mail to Dan", "Given mail to Bronya"]


def test_out_of_stock_notifies_nobody():
    item = Item("Adidas shoe", False)
    item.register(Customer("Dan"))
    assert item.check() == []
    assert item.notify_all() == ["Given mail to Dan"]


def test_deregister_removes_only_that_customer():
    item = Item("Adidas shoe", True)
    dan = Customer("Dan")
    other_dan = Customer("Dan")
    item.register(dan)
    item.register(other_dan)
    item.deregister(dan)
    assert item.customers == [other_dan]


def test_deregister_unknown_is_harmless():
    item = Item("Adidas shoe", True)
    dan = Customer("Dan")
    item.register(dan)
    item.deregister(Customer("Bronya"))
    assert item.customers == [dan]


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Given mail to Brocklyn",
        "Given mail to Dan",
        "Given mail to Bronya",
    ]