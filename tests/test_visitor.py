from patternkit.visitor import (
    AreaCalculator,
    Circle,
    PerimeterCalculator,
    Rectangle,
    ShapeVisitor,
    main,
)


class Recorder(ShapeVisitor):
    def __init__(self):
        self.seen = []

    def visit_circle(self, circle):
        self.seen.append(circle)
        return "circle"

    def visit_rectangle(self, rectangle):
        self.seen.append(rectangle)
        return "rectangle"


def test_accept_dispatches_with_the_shape_itself():
    recorder = Recorder()
    circle = Circle(5)
    rectangle = Rectangle(5, 10)
    assert circle.accept(recorder) == "circle"
    assert rectangle.accept(recorder) == "rectangle"
    assert recorder.seen == [circle, rectangle]


def test_area_calculator():
    assert Circle(5).accept(AreaCalculator()) == "Call area circle"
    assert Rectangle(5, 10).accept(AreaCalculator()) == "Call area rectangle"


def test_perimeter_calculator():
    assert Circle(5).accept(PerimeterCalculator()) == "Call perimeter circle"
    assert Rectangle(5, 10).accept(PerimeterCalculator()) == "Call perimeter rectangle"


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Call area circle",
        "Call perimeter circle",
        "Call area rectangle",
        "Call perimeter rectangle",
        "Call area circle",
        "Call perimeter circle",
    ]