# patternkit

Small, self-contained demonstrations of the classic object-oriented design
patterns. Each pattern lives in its own module, can be imported and used from
Python, and has a demo command that runs a short scenario and prints what
happens.

Most methods return the text that describes what they did, rather than
printing it, so the objects are easy to use and test from Python. The demo
commands print that text. A few classes (`facade.Wallet`, `proxy.RealImage`,
`proxy.ProxyImage`, `template_method.OTPVerifier`) take a `log` callable,
`print` by default, that receives each message as it happens.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Patterns

| Kind        | Module                          | Main classes                                   |
|-------------|---------------------------------|------------------------------------------------|
| Creational  | `patternkit.abstract_factory`   | `Factory`, `Adidas`, `Nike`                    |
|             | `patternkit.builder`            | `Director`, `WoodHouseBuilder`, `IceHouseBuilder`, `House` |
|             | `patternkit.factory_method`     | `AnimalFactory`, `AnimalType`                  |
|             | `patternkit.prototype`          | `Inode`, `File`, `Folder`                      |
|             | `patternkit.singleton`          | `Singleton`                                    |
| Structural  | `patternkit.adapter`            | `Adapter`, `Color`                             |
|             | `patternkit.bridge`             | `Computer`, `Win`, `Mac`, `Epson`, `HP`        |
|             | `patternkit.composite`          | `Component`, `File`, `Folder`                  |
|             | `patternkit.decorator`          | `FileStream`, `CompressedStream`, `EncryptedStream` |
|             | `patternkit.facade`             | `Wallet`, `WalletError`                        |
|             | `patternkit.flyweight`          | `SoldierFactory`, `Soldier`                    |
|             | `patternkit.proxy`              | `ProxyImage`, `RealImage`                      |
| Behavioural | `patternkit.chain`              | `Patient`, `Reception`, `Doctor`, `Medical`, `Cashier` |
|             | `patternkit.command`            | `Button`, `OnCommand`, `OffCommand`, `TV`      |
|             | `patternkit.interpreter`        | `SimpleParser`, `Parser`, `Number`, `Variable`, `Operator` |
|             | `patternkit.iterator`           | `NodeList`, `NodeIterator`, `Node`             |
|             | `patternkit.mediator`           | `Station`, `RedTrain`, `BlueTrain`             |
|             | `patternkit.memento`            | `Face`, `Emoji`, `Caretaker`                   |
|             | `patternkit.observer`           | `Item`, `Customer`                             |
|             | `patternkit.state`              | `Switch`, `OnState`, `OffState`                |
|             | `patternkit.strategy`           | `CPU`, `Algorithm`, `FCFS`, `SJF`, `RR`        |
|             | `patternkit.template_method`    | `OTPVerifier`, `EmailOTP`, `SMSOTP`            |
|             | `patternkit.visitor`            | `Circle`, `Rectangle`, `AreaCalculator`, `PerimeterCalculator` |

## Using the modules

Build a house step by step with a director and a concrete builder:

```python
from patternkit.builder import Director, WoodHouseBuilder

director = Director()
director.use(WoodHouseBuilder())
director.construct()
print(director.get_house().describe())
```

Share one soldier object per uniform colour:

```python
from patternkit.flyweight import SoldierFactory

factory = SoldierFactory()
red = factory.get_soldier("red")
assert factory.get_soldier("red") is red
print(red.display("MTX 65", 20, 30, 40))
```

Hide several subsystems behind one wallet; a wrong name, a wrong code or an
overdraft raises `WalletError`:

```python
from patternkit.facade import Wallet, WalletError

wallet = Wallet("No name", 1111, 100000)
wallet.get_money("No name", 1111, 50000)
try:
    wallet.get_money("No name", 1111, 60000)
except WalletError:
    print("not enough credit")
```

Stack stream decorators around a file stream:

```python
from patternkit.decorator import CompressedStream, EncryptedStream, FileStream

stream = CompressedStream(EncryptedStream(FileStream()))
print(stream.write("Hello, World!"))
# Writing data to file: encrypted(compressed(Hello, World!))
```

Evaluate a single-character expression with the stack-based interpreter:

```python
from patternkit.interpreter import SimpleParser

print(SimpleParser().evaluate("a+b*c-d", {"a": 5, "b": 10, "c": 2, "d": 3}))
```

`Singleton` cannot be constructed directly; `Singleton.get_instance()` always
returns the same object, while `copy.copy()` of it gives an independent copy.

## Demo commands

Every pattern has a command that runs its demonstration scenario, for example:

```
patternkit-singleton
patternkit-builder
patternkit-facade
patternkit-interpreter
patternkit-visitor
```

The full set is `patternkit-abstract-factory`, `patternkit-adapter`,
`patternkit-bridge`, `patternkit-builder`, `patternkit-chain`,
`patternkit-command`, `patternkit-composite`, `patternkit-decorator`,
`patternkit-facade`, `patternkit-factory-method`, `patternkit-flyweight`,
`patternkit-interpreter`, `patternkit-iterator`, `patternkit-mediator`,
`patternkit-memento`, `patternkit-observer`, `patternkit-prototype`,
`patternkit-proxy`, `patternkit-singleton`, `patternkit-state`,
`patternkit-strategy`, `patternkit-template-method` and `patternkit-visitor`.

`patternkit-facade` makes a second withdrawal larger than the remaining
balance, so it reports the error on standard error and exits with status 1.

`patternkit-template-method` prints a four-digit one-time code, asks for it on
standard input, prints `succesful` or `unsuccesful`, and exits with status 0
when the entered value matches and 1 when it does not.

## What the package does not do

These are demonstrations only. Nothing is written to disk, loaded from disk or
sent anywhere: `FileStream` only describes the write, `RealImage` only reports
loading and displaying, the one-time-password classes only return the message
text instead of sending an e-mail or SMS, and the visitors name the operation
rather than computing areas or perimeters.