from __future__ import annotations

from lunar_engine.api.modes import Mode


class SpyMode(Mode):
    """Mode recording every hook invocation as `(hook, args)`."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def hooks(self) -> list[str]:
        return [hook for hook, _ in self.calls]

    def count(self, hook: str) -> int:
        return sum(1 for name, _ in self.calls if name == hook)

    def init(self) -> None:
        self.calls.append(("init", ()))

    def enter(self, *args) -> None:
        self.calls.append(("enter", args))

    def exit(self) -> None:
        self.calls.append(("exit", ()))

    def pause(self) -> None:
        self.calls.append(("pause", ()))

    def resume(self) -> None:
        self.calls.append(("resume", ()))

    def update(self, dt: float) -> None:
        self.calls.append(("update", (dt,)))

    def draw(self) -> None:
        self.calls.append(("draw", ()))

    def keypressed(self, key: str) -> None:
        self.calls.append(("keypressed", (key,)))

    def keyreleased(self, key: str) -> None:
        self.calls.append(("keyreleased", (key,)))

    def mousepressed(self, x: float, y: float, button: int) -> None:
        self.calls.append(("mousepressed", (x, y, button)))

    def mousereleased(self, x: float, y: float, button: int) -> None:
        self.calls.append(("mousereleased", (x, y, button)))

    def mousemoved(self, x: float, y: float, dx: float, dy: float) -> None:
        self.calls.append(("mousemoved", (x, y, dx, dy)))

    def textinput(self, text: str) -> None:
        self.calls.append(("textinput", (text,)))

    def cleanup(self) -> None:
        self.calls.append(("cleanup", ()))


class FakeRenderer:
    def __init__(self) -> None:
        self.fills: list[tuple[str, str, float]] = []

    def fill_window(self, key: str, color: str, z: float = -100.0) -> None:
        self.fills.append((key, color, z))


class Sprite:
    def __init__(self, x: float = 0.0, y: float = 0.0, alpha: float = 1.0) -> None:
        self.x = x
        self.y = y
        self.alpha = alpha
