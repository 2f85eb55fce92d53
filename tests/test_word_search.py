import numpy as np

from statesearch.problems.word_search import (
    GridLocation, WordSearchConstraint, fill_grid, generate_domain, generate_grid, word_search_csp,
)

WORDS = ["MATTHEW", "JOE", "MARY", "SARAH", "SALLY"]


def test_grid_is_seeded_uppercase_letters():
    grid = generate_grid(9, 9, seed=5)
    assert grid.shape == (9, 9)
    assert all(ch.isalpha() and ch.isupper() for ch in grid.flat)
    assert np.array_equal(grid, generate_grid(9, 9, seed=5))


def test_domain_covers_four_directions():
    grid = generate_grid(9, 9, seed=0)
    domain = generate_domain("JOE", grid)
    # 7 starts per line across and down, 7 x 7 for each diagonal
    assert len(domain) == 63 + 63 + 49 + 49
    assert domain[0] == (GridLocation(0, 0), GridLocation(0, 1), GridLocation(0, 2))
    assert (GridLocation(0, 2), GridLocation(1, 1), GridLocation(2, 0)) in domain
    assert all(0 <= r < 9 and 0 <= c < 9 for placement in domain for r, c in placement)


def test_word_longer_than_grid_has_no_placements():
    assert generate_domain("ABCDEFGHIJ", generate_grid(9, 9, seed=0)) == []


def test_overlap_constraint():
    c = WordSearchConstraint(["AB", "CD"])
    a = (GridLocation(0, 0), GridLocation(0, 1))
    assert c.satisfied({"AB": a})
    assert c.satisfied({"AB": a, "CD": (GridLocation(1, 0), GridLocation(1, 1))})
    assert not c.satisfied({"AB": a, "CD": (GridLocation(0, 1), GridLocation(1, 1))})


def test_solution_places_every_word_without_overlap():
    grid = generate_grid(9, 9, seed=7)
    solution = word_search_csp(WORDS, grid).backtracking_search()
    assert set(solution) == set(WORDS)
    cells = [loc for placement in solution.values() for loc in placement]
    assert len(cells) == len(set(cells))
    for word, placement in solution.items():
        assert len(placement) == len(word)


def test_fill_grid_writes_words_forwards_or_backwards():
    grid = generate_grid(9, 9, seed=7)
    solution = word_search_csp(WORDS, grid).backtracking_search()
    filled = fill_grid(grid, solution, seed=3)
    assert filled is not grid
    for word, placement in solution.items():
        letters = "".join(filled[r, c] for r, c in placement)
        assert letters in (word, word[::-1])
