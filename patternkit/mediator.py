"""Trains coordinating use of a single track through a station."""

from __future__ import annotations

from collections import deque


class Station:
    """The mediator: keeps the train currently holding the track."""

    def __init__(self) -> None:
        self._queue: deque[Train] = deque()

    def permit_go(self, train: Train) -> bool:
        """Admit the train if the track is free."""
        if not self._queue:
            self._queue.append(train)
            return True
        return False

    def waiting(self, train: Train) -> bool:
        """Return whether another train is currently holding the track."""
        if not self._queue:
            raise RuntimeError("no train at the station")
        return self._queue[0] is not train

    def change_train(self, train: Train) -> None:
        """Hand the track over to the given train."""
        if not self._queue:
            raise RuntimeError("no train at the station")
        self._queue.popleft()
        self._queue.append(train)


class Train:
    """A train that asks its station before going."""

    ready_message = ""
    handover_message = ""
    running_message = ""

    def __init__(self, station: Station) -> None:
        self.station = station

    def check_to_go(self) -> str:
        if self.station.permit_go(self):
            return self.ready_message
        if self.station.waiting(self):
            self.station.change_train(self)
            return self.handover_message
        return self.running_message


class RedTrain(Train):
    ready_message = "Red train ready to go"
    handover_message = "The blue train will finish"
    running_message = "The red train is running"


class BlueTrain(Train):
    ready_message = "Blue train ready to go"
    handover_message = "The red train will be finish"
    running_message = "The blue train is running"


def main(argv: list[str] | None = None) -> int:
    """Let a red train go, then have a blue train ask twice."""
    station = Station()
    red = RedTrain(station)
    blue = BlueTrain(station)
    print(red.check_to_go())
    print(blue.check_to_go())
    print(blue.check_to_go())
    return 0