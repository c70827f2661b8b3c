import pytest

from pathcount.graph import from_edges


@pytest.fixture
def diamond1():
    # Weights:
    #       [1]        [2]
    #   A────────►B─────────►D
    #   │         │          ▲
    #   │[2]      │[1]       │
    #   │         ▼          │
    #   └────────►C──────────┘
    #                 [1]
    #
    # E is isolated.
    return from_edges(
        [
            ("A", "B", 1),
            ("A", "C", 2),
            ("B", "C", 1),
            ("B", "D", 2),
            ("C", "D", 1),
        ],
        nodes=["A", "B", "C", "D", "E"],
    )


@pytest.fixture
def line1():
    # Weights:
    #     [1]      [1]      [1]
    #  A───────►B───────►C───────►D
    #
    return from_edges([("A", "B", 1), ("B", "C", 1), ("C", "D", 1)])


@pytest.fixture
def square2():
    # Weights:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►D─────────┘
    #
    return from_edges([("A", "B", 1), ("B", "C", 1), ("A", "D", 1), ("D", "C", 1)])


@pytest.fixture
def square_unequal():
    # A->B->C costs 2, A->D->C costs 4; D is reached first at a higher cost
    # than C ends up with, so C's first estimate is later improved.
    return from_edges([("A", "D", 1), ("D", "C", 3), ("A", "B", 1), ("B", "C", 1)])


@pytest.fixture
def float_ties():
    # 0.1 + 0.2 != 0.3 in binary floating point; the two paths to C must tie.
    return from_edges([("A", "B", 0.1), ("B", "C", 0.2), ("A", "C", 0.3)])


@pytest.fixture
def parallel1():
    # Two parallel A->B edges of equal weight and one heavier one.
    return from_edges([("A", "B", 1), ("A", "B", 1), ("A", "B", 5), ("B", "C", 1)])


@pytest.fixture
def grid3x3():
    # 3x3 directed grid, edges go right and down with weight 1.
    # Shortest paths from (0, 0) to (i, j) number C(i + j, i).
    edges = []
    for i in range(3):
        for j in range(3):
            if j < 2:
                edges.append(((i, j), (i, j + 1), 1))
            if i < 2:
                edges.append(((i, j), (i + 1, j), 1))
    return from_edges(edges)


@pytest.fixture
def cycle1():
    # Directed cycle A->B->C->A with a chord A->C.
    return from_edges([("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("A", "C", 2)])
