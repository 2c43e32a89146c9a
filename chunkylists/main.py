import logging
import sys
from typing import Callable, List, Optional

from .chunky_array_list import ChunkyArrayList
from .config import Config
from .doubly_linked_list import DoublyLinkedList
from .errors import EmptyListError, ListError
from .list_adt import ListADT
from .singly_linked_list import SinglyLinkedList

DELIM = "&-=-&"

VARIANTS = ("chunky", "singly", "doubly")

USAGE = "usage: chunkylists [task1|task2|task3|task4] [chunky|singly|doubly] [chunk_size]"

Factory = Callable[[], ListADT]


def print_section(name: str):
    print(f"{DELIM} {name}")


def print_list(lst: ListADT, label: str = ""):
    if label:
        print(f"{label}: ", end="")
    vs = lst.to_list()
    print(f"[{' '.join(map(str, vs))}] size={lst.size()}")


def print_layout(lst: ListADT):
    if isinstance(lst, ChunkyArrayList):
        print(f"layout={lst.chunk_layout()}")


def make_factory(variant: str, chunk_size: int) -> Factory:
    if variant == "chunky":
        return lambda: ChunkyArrayList(chunk_size)
    if variant == "singly":
        return SinglyLinkedList
    if variant == "doubly":
        return DoublyLinkedList
    raise ValueError(f"unknown variant: {variant}")


# ───────────────────────── tasks ─────────────────────────

def task1_basic_ops(make: Factory):
    print_section("start-task1")

    lst = make()
    print_section("empty-list")
    print(f"empty={lst.is_empty()} size={lst.size()}")
    try:
        lst.remove_front()
    except EmptyListError as e:
        print(f"remove_front raised {type(e).__name__}")

    print_section("add_front_back")
    lst.add_front(2)
    lst.add_back(5)
    lst.add_front(1)
    print_list(lst, "after-add")

    print_section("front_back")
    print(f"front={lst.get_front()} back={lst.get_back()}")

    print_section("remove_front_back")
    print(f"removed={lst.remove_front()}")
    print(f"removed={lst.remove_back()}")
    print_list(lst, "after-remove")

    print_section("clear")
    lst.clear()
    print(f"empty={lst.is_empty()} size={lst.size()}")


def task2_insert_erase(make: Factory):
    print_section("start-task2")

    lst = make()
    for i in range(1, 7):
        lst.add_back(i)
    print_list(lst, "seed")
    print_layout(lst)

    print_section("append-past-full-block")
    lst.add_index(lst.size(), 7)
    print_list(lst, "after-append")
    print_layout(lst)

    print_section("insert-at-block-boundary")
    lst.add_index(2, 20)
    print_list(lst, "after-boundary")
    print_layout(lst)

    print_section("insert-into-full-block")
    lst.add_index(0, 0)
    print_list(lst, "after-split")
    print_layout(lst)

    print_section("set_get")
    lst.set_index(1, 10)
    print(f"at1={lst.get_index(1)} at3={lst.get_index(3)}")

    print_section("remove_index")
    print(f"removed={lst.remove_index(1)}")
    print(f"removed={lst.remove_index(lst.size() - 1)}")
    print(f"removed={lst.remove_index(lst.size() // 2)}")
    print_list(lst, "after-erase")
    print_layout(lst)


def task3_copy_steal(make: Factory):
    print_section("start-task3")

    a = make()
    for i in range(4):
        a.add_back(i * 10)
    print_list(a, "a")

    print_section("copy")
    b = a.copy()
    print_list(b, "b")

    print_section("modify-original")
    a.add_back(40)
    a.remove_index(1)
    print_list(a, "a-after")
    print_list(b, "b-unchanged")

    print_section("steal")
    c = make()
    c.steal_from(a)
    print_list(c, "c")
    print_list(a, "a-moved-from")


def task4_chunk_layout(make: Factory):
    print_section("start-task4")

    lst = make()
    if not isinstance(lst, ChunkyArrayList):
        print("skipped: not a chunky list")
        return
    print(f"chunk_size={lst.chunk_size}")

    print_section("fill")
    for i in range(1, lst.chunk_size * 2 + 1):
        lst.add_back(i)
    print(f"layout={lst.chunk_layout()}")

    print_section("split")
    lst.add_index(1, 99)
    print(f"layout={lst.chunk_layout()}")

    print_section("prune")
    while lst.size() > lst.chunk_size:
        lst.remove_front()
    print(f"layout={lst.chunk_layout()}")


TASKS = {
    "task1": task1_basic_ops,
    "task2": task2_insert_erase,
    "task3": task3_copy_steal,
    "task4": task4_chunk_layout,
}


# ───────────────────────── entry ─────────────────────────

def configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {level_name}")
    logging.basicConfig(level=level)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    which = args[0] if len(args) >= 1 else ""
    variant = args[1] if len(args) >= 2 else "chunky"
    if which and which not in TASKS:
        print(USAGE, file=sys.stderr)
        return 2
    if variant not in VARIANTS:
        print(USAGE, file=sys.stderr)
        return 2
    try:
        configure_logging(Config.LOG_LEVEL)
        chunk_size = int(args[2]) if len(args) >= 3 else Config.DEFAULT_CHUNK_SIZE
        make = make_factory(variant, chunk_size)
        make()
    except ValueError as e:
        print(f"{e}\n{USAGE}", file=sys.stderr)
        return 2

    # default: run all
    tasks = [TASKS[which]] if which else list(TASKS.values())
    try:
        for task in tasks:
            task(make)
    except ListError as e:
        print(f"error={e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
