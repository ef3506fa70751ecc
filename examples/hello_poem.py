"""
Mini example of the GraphPoet interface.

Run: python examples/hello_poem.py
"""

from __future__ import annotations

from graphpoet import GraphPoet


CORPUS = [
    "To explore strange new worlds",
    "To seek out new life and new civilizations",
]


def main() -> None:
    poet = GraphPoet.from_lines(CORPUS)
    print(repr(poet.graph))
    print(poet.graph.to_display_string())

    text = "Seek to explore new and exciting synergies!"
    print(f"Input: {text}")
    print(f"Poem:  {poet.poem(text)}")

    bridge = poet.bridge("new", "and")
    print(f"Bridge new->and: {bridge or '<none>'}")


if __name__ == "__main__":
    main()
