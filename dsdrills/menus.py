"""Interactive text menus for exercising the stack, queue and deque containers."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from dsdrills.array_queue import ArrayIntQueue
from dsdrills.double_stack import SharedStack, Side
from dsdrills.ring_deque import IntDeque
from dsdrills.ring_queue import IntQueue
from dsdrills.stack import EmptyError, FullError, IntStack

DEFAULT_CAPACITY = 64

_EMPTY = ("비어 있습니다", "비어 있지 않습니다")
_FULL = ("가득 찼습니다", "가득 차지 않았습니다")


class _EndOfInput(Exception):
    """Raised when the input runs out."""


class _Session:
    """Reads integers from a text stream and writes to another."""

    def __init__(self, infile: TextIO, outfile: TextIO) -> None:
        self._tokens = self._token_stream(infile)
        self._out = outfile

    @staticmethod
    def _token_stream(infile: TextIO) -> Iterator[str]:
        for line in infile:
            yield from line.split()

    def write(self, text: str) -> None:
        self._out.write(text)

    def line(self, text: str) -> None:
        self._out.write(text + "\n")

    def error(self, what: str) -> None:
        self.line(f"\a오류: {what}에 실패했습니다.")

    def read_int(self, prompt: str = "") -> int:
        if prompt:
            self.write(prompt)
        try:
            token = next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None


_Action = Callable[[_Session], None]


def _items_line(values) -> str:
    return "".join(f"{value} " for value in values)


def _state(flag: bool, words: tuple[str, str]) -> str:
    return words[0] if flag else words[1]


def _run(
    infile: TextIO,
    outfile: TextIO,
    status: Callable[[], str],
    menu: str,
    actions: dict[int, _Action],
) -> None:
    session = _Session(infile, outfile)
    while True:
        session.write(status())
        session.write(menu)
        try:
            choice = session.read_int()
            if choice == 0:
                break
            action = actions.get(choice)
            if action is not None:
                action(session)
        except _EndOfInput:
            break


def _take(session: _Session, take: Callable[[], int], what: str, message: str) -> None:
    try:
        x = take()
    except EmptyError:
        session.error(what)
    else:
        session.line(message.format(x))


def _put(session: _Session, put: Callable[[int], None], what: str) -> None:
    x = session.read_int("데이터: ")
    try:
        put(x)
    except FullError:
        session.error(what)


def _found_at(session: _Session, idx: int | None) -> bool:
    if idx is None:
        session.error("검색")
        return False
    session.line(f"그 데이터는 인덱스{idx}의 위치에 있습니다.")
    return True


def run_stack_menu(stack: IntStack, infile: TextIO, outfile: TextIO) -> None:
    """Drive ``stack`` from menu choices read from ``infile``."""

    def search(session: _Session) -> None:
        x = session.read_int("검색할 데이터: ")
        _found_at(session, stack.search(x))

    def judge(session: _Session) -> None:
        session.line(f"스택은 {_state(stack.is_empty(), _EMPTY)}。")
        session.line(f"스택은 {_state(stack.is_full(), _FULL)}。")

    actions: dict[int, _Action] = {
        1: lambda s: _put(s, stack.push, "푸시"),
        2: lambda s: _take(s, stack.pop, "팝", "팝 데이터는 {}입니다."),
        3: lambda s: _take(s, stack.peek, "피크", "피크 데이터는 {}입니다."),
        4: lambda s: s.line(_items_line(stack)),
        5: search,
        6: lambda s: stack.clear(),
        7: judge,
    }
    _run(
        infile,
        outfile,
        lambda: f"현재 데이터 수:{len(stack)} / {stack.capacity()}\n",
        "(1)푸시 (2)팝 (3)피크 (4)출력 (5)검색 (6) 클리어 (7) 비었는지 판정 (0) 종료: ",
        actions,
    )


def run_shared_stack_menu(stack: SharedStack, infile: TextIO, outfile: TextIO) -> None:
    """Drive the two stacks of ``stack`` from menu choices read from ``infile``."""

    def side_actions(side: Side) -> list[_Action]:
        def search(session: _Session) -> None:
            x = session.read_int("검색할 데이터: ")
            _found_at(session, stack.search(side, x))

        return [
            lambda s: _put(s, lambda x: stack.push(side, x), "푸시"),
            lambda s: _take(s, lambda: stack.pop(side), "팝", "팝 데이터는 {}입니다."),
            lambda s: _take(s, lambda: stack.peek(side), "피크", "피크 데이터는 {}입니다."),
            lambda s: s.line(_items_line(stack.items(side))),
            search,
            lambda s: stack.clear(side),
        ]

    def judge(session: _Session) -> None:
        session.line(f"스택 A는 {_state(stack.is_empty(Side.A), _EMPTY)}。")
        session.line(f"스택 B는 {_state(stack.is_empty(Side.B), _EMPTY)}。")
        session.line(f"스택은{_state(stack.is_full(), _FULL)}。")

    actions: dict[int, _Action] = dict(
        enumerate(side_actions(Side.A) + side_actions(Side.B), start=1)
    )
    actions[13] = judge
    _run(
        infile,
        outfile,
        lambda: (
            f"현재 데이터 수:A:{stack.size(Side.A)} B:{stack.size(Side.B)}"
            f" / {stack.capacity()}\n"
        ),
        " 1)A에 Push  2)A에서 Pop  3)A에서 Peek  4)A를 출력  5)A에서 검색  6)A를 클리어\n"
        " 7)B에 Push  8)B에서 Pop  9)B에서 Peek 10)B를 출력 11)B에서 검색 12)B를 클리어\n"
        "13)비었는지 판정 0) 종료: ",
        actions,
    )


def run_queue_menu(queue: IntQueue, infile: TextIO, outfile: TextIO) -> None:
    """Drive the ring-buffer ``queue`` from menu choices read from ``infile``."""

    def search(session: _Session) -> None:
        x = session.read_int("검색할 데이터: ")
        if _found_at(session, queue.search(x)):
            session.line(
                f"큐의 맨 앞 요소로부터 {queue.search_logical(x)}개 뒤의 위치입니다."
            )

    def judge(session: _Session) -> None:
        session.line(f"큐가 {_state(queue.is_empty(), _EMPTY)}。")
        session.line(f"큐가 {_state(queue.is_full(), _FULL)}。")

    actions: dict[int, _Action] = {
        1: lambda s: _put(s, queue.enqueue, "인큐"),
        2: lambda s: _take(s, queue.dequeue, "디큐", "디큐한 데이터는 {}입니다."),
        3: lambda s: _take(s, queue.peek, "피크", "피크한 데이터는 {}입니다."),
        4: lambda s: s.line(_items_line(queue)),
        5: search,
        6: lambda s: queue.clear(),
        7: judge,
    }
    _run(
        infile,
        outfile,
        lambda: f"현재 데이터 수:{len(queue)} / {queue.capacity()}\n",
        "(1)인큐 (2)디큐 (3)피크 (4)출력 (5)검색 (6)클리어 (7)비어 있는지 판정 (0) 종료: ",
        actions,
    )


def run_array_queue_menu(queue: ArrayIntQueue, infile: TextIO, outfile: TextIO) -> None:
    """Drive the shifting-array ``queue`` from menu choices read from ``infile``."""

    def search(session: _Session) -> None:
        x = session.read_int("검색할 데이터: ")
        _found_at(session, queue.search(x))

    def judge(session: _Session) -> None:
        session.line(f"스택은 {_state(queue.is_empty(), _EMPTY)}。")
        session.line(f"스택은 {_state(queue.is_full(), _FULL)}。")

    actions: dict[int, _Action] = {
        1: lambda s: _put(s, queue.enqueue, "인큐"),
        2: lambda s: _take(s, queue.dequeue, "디큐", "디큐한 데이터는 {}입니다."),
        3: lambda s: _take(s, queue.peek, "피크", "피크한 데이터는 {}입니다."),
        4: lambda s: s.line(_items_line(queue)),
        5: search,
        6: lambda s: queue.clear(),
        7: judge,
    }
    _run(
        infile,
        outfile,
        lambda: f"현재 데이터 수:{len(queue)} / {queue.capacity()}\n",
        "(1)인큐 (2)디큐 (3)피크 (4)출력 (5)검색 (6)클리어 (7)비어 있는지 판정 (0) 종료: ",
        actions,
    )


def run_deque_menu(deque: IntDeque, infile: TextIO, outfile: TextIO) -> None:
    """Drive ``deque`` from menu choices read from ``infile``."""

    def search(session: _Session) -> None:
        x = session.read_int("검색할 데이터: ")
        if _found_at(session, deque.search(x)):
            session.line(
                f"큐의 맨 앞 요소로부터 {deque.search_logical(x)}개 뒤의 위치입니다."
            )

    def judge(session: _Session) -> None:
        session.line(f"큐가 {_state(deque.is_empty(), _EMPTY)}。")
        session.line(f"큐가 {_state(deque.is_full(), _FULL)}。")

    actions: dict[int, _Action] = {
        1: lambda s: _put(s, deque.enqueue_front, "인큐"),
        2: lambda s: _take(s, deque.dequeue_front, "디큐", "디큐 데이터는 {}입니다."),
        3: lambda s: _take(s, deque.peek_front, "피크", "피크 데이터는 {}입니다."),
        4: lambda s: s.line(_items_line(deque)),
        5: lambda s: _put(s, deque.enqueue_rear, "인큐"),
        6: lambda s: _take(s, deque.dequeue_rear, "디큐", "디큐 데이터는 {}입니다."),
        7: lambda s: _take(s, deque.peek_rear, "피크", "피크 데이터는 {}입니다."),
        8: search,
        9: lambda s: deque.clear(),
        10: judge,
    }
    _run(
        infile,
        outfile,
        lambda: f"현재 데이터 수:{len(deque)}/{deque.capacity()}\n",
        "(1)맨 앞에 인큐 (2)맨 앞에서부터 디큐 (3)맨 앞에서부터 피크 (4)출력\n"
        "(5)맨 뒤에 인큐 (6)맨 뒤에서부터 디큐 (7)맨 뒤에서부터 피크 (8)검색\n"
        "(9)클리어          (10)비어 있는지 판정       (0) 종료: ",
        actions,
    )


def _console(run: Callable[[object, TextIO, TextIO], None], container: object) -> int:
    try:
        run(container, sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def stack_main(argv: list[str] | None = None) -> int:
    """Run the stack menu on the console."""
    return _console(run_stack_menu, IntStack(DEFAULT_CAPACITY))


def shared_stack_main(argv: list[str] | None = None) -> int:
    """Run the shared-array double stack menu on the console."""
    return _console(run_shared_stack_menu, SharedStack(DEFAULT_CAPACITY))


def queue_main(argv: list[str] | None = None) -> int:
    """Run the ring-buffer queue menu on the console."""
    return _console(run_queue_menu, IntQueue(DEFAULT_CAPACITY))


def array_queue_main(argv: list[str] | None = None) -> int:
    """Run the shifting-array queue menu on the console."""
    return _console(run_array_queue_menu, ArrayIntQueue(DEFAULT_CAPACITY))


def deque_main(argv: list[str] | None = None) -> int:
    """Run the deque menu on the console."""
    return _console(run_deque_menu, IntDeque(DEFAULT_CAPACITY))