"""CSP model, constraint registry and backtracking solver."""
import pytest

from statesearch.csp import (
    CSP, AllDifferentConstraint, CSPError, DuplicateVariable, InvalidAssignment, InvalidConstraint,
    InvalidDomain, NotEqualConstraint, PredicateConstraint, first_unassigned, most_constrained,
)
from statesearch.problems.map_coloring import BORDERS, REGIONS, australia_csp
from statesearch.problems.queens import QueensConstraint, queens_csp
from statesearch.problems.send_more_money import send_more_money_csp
from statesearch.problems.word_search import generate_grid, word_search_csp


def _two_var_csp(domain_a, domain_b):
    csp = CSP(["A", "B"], {"A": domain_a, "B": domain_b})
    csp.add_constraint(NotEqualConstraint("A", "B"))
    return csp


def test_missing_domain_fails_construction():
    with pytest.raises(InvalidDomain):
        CSP(["A", "B"], {"A": [1]})
    assert issubclass(InvalidDomain, CSPError)
    assert issubclass(InvalidDomain, ValueError)


def test_constraint_on_undeclared_variable_fails():
    csp = CSP(["A"], {"A": [1, 2]})
    with pytest.raises(InvalidConstraint):
        csp.add_constraint(NotEqualConstraint("A", "Z"))
    assert csp.constraints["A"] == []


def test_constraint_is_registered_under_every_variable():
    csp = _two_var_csp([1, 2], [1, 2])
    assert csp.constraints["A"] == csp.constraints["B"]
    assert len(csp.constraints["A"]) == 1


def test_unsatisfiable_csp_returns_none():
    assert _two_var_csp([1], [1]).backtracking_search() is None


def test_empty_csp_solves_to_empty_assignment():
    assert CSP([], {}).backtracking_search() == {}


def test_first_solution_follows_declaration_and_domain_order():
    assert _two_var_csp([1, 2, 3], [1, 2, 3]).backtracking_search() == {"A": 1, "B": 2}


def test_send_more_money():
    solution = send_more_money_csp().backtracking_search()
    assert solution == {"S": 9, "E": 5, "N": 6, "D": 7, "M": 1, "O": 0, "R": 8, "Y": 2}
    digits = lambda word: int("".join(str(solution[ch]) for ch in word))
    assert digits("SEND") + digits("MORE") == digits("MONEY")


def test_australia_map_coloring():
    solution = australia_csp().backtracking_search()
    assert set(solution) == set(REGIONS)
    for place1, place2 in BORDERS:
        assert solution[place1] != solution[place2]
    assert solution == {
        "Western Australia": "red", "Northern Territory": "green", "South Australia": "blue",
        "Queensland": "red", "New South Wales": "green", "Victoria": "red", "Tasmania": "green",
    }


def test_two_colors_cannot_color_australia():
    assert australia_csp(colors=("red", "green")).backtracking_search() is None


def test_eight_queens_first_solution():
    solution = queens_csp(8).backtracking_search()
    assert solution == {1: 1, 2: 5, 3: 8, 4: 6, 5: 3, 6: 7, 7: 2, 8: 4}
    assert QueensConstraint(list(range(1, 9))).satisfied(solution)


def test_four_queens_enumerates_both_solutions():
    solutions = list(queens_csp(4).solutions())
    assert solutions == [{1: 2, 2: 4, 3: 1, 4: 3}, {1: 3, 2: 1, 3: 4, 4: 2}]
    assert solutions[0] is not solutions[1]


def test_three_queens_is_unsatisfiable():
    assert queens_csp(3).solve() is None


def test_initial_assignment_is_extended_not_mutated():
    initial = {"Tasmania": "blue"}
    solution = australia_csp().solve(initial)
    assert initial == {"Tasmania": "blue"}
    assert solution["Tasmania"] == "blue"
    for place1, place2 in BORDERS:
        assert solution[place1] != solution[place2]


def test_inconsistent_initial_assignment_is_unsatisfiable():
    assert australia_csp().solve({"Victoria": "red", "Tasmania": "red"}) is None


def test_complete_initial_assignment_is_still_checked():
    assert _two_var_csp([1, 2], [1, 2]).solve({"A": 1, "B": 1}) is None
    assert _two_var_csp([1, 2], [1, 2]).solve({"A": 1, "B": 2}) == {"A": 1, "B": 2}


def test_invalid_initial_assignments_raise():
    csp = australia_csp()
    with pytest.raises(InvalidAssignment):
        csp.solve({"Atlantis": "red"})
    with pytest.raises(InvalidAssignment):
        csp.solve({"Victoria": "purple"})


def test_consistent_only_checks_constraints_on_the_variable():
    csp = CSP(["A", "B", "C"], {v: [1, 2] for v in "ABC"})
    csp.add_constraint(NotEqualConstraint("A", "B"))
    clash = {"A": 1, "B": 1, "C": 2}
    assert not csp.consistent("A", clash)
    assert csp.consistent("C", clash)


def test_variable_ordering_heuristics():
    csp = CSP(["A", "B"], {"A": [1, 2, 3], "B": [1]})
    csp.add_constraint(NotEqualConstraint("A", "B"))
    assert first_unassigned(csp, {}) == "A"
    assert most_constrained(csp, {}) == "B"
    assert most_constrained(csp, {"B": 1}) == "A"
    expected = {"A": 2, "B": 1}
    assert csp.backtracking_search() == expected
    assert csp.backtracking_search(select_variable=most_constrained) == expected


def test_most_constrained_still_solves_queens():
    solution = queens_csp(6).backtracking_search(select_variable=most_constrained)
    assert QueensConstraint(list(range(1, 7))).satisfied(solution)
    assert len(solution) == 6


def test_all_different_prunes_partial_duplicates():
    c = AllDifferentConstraint(["a", "b", "c"])
    assert c.satisfied({"a": 1})
    assert c.satisfied({"a": 1, "b": 2})
    assert not c.satisfied({"a": 1, "b": 1})


def test_predicate_constraint_waits_for_all_variables():
    c = PredicateConstraint(["x", "y"], lambda x, y: x + y == 7 and x < y)
    assert c.satisfied({"x": 0})
    assert not c.satisfied({"x": 0, "y": 1})

    csp = CSP(["x", "y"], {"x": range(6), "y": range(6)})
    csp.add_constraint(c)
    assert csp.solve() == {"x": 2, "y": 5}


def test_repeated_variable_fails_construction():
    with pytest.raises(DuplicateVariable):
        CSP(["A", "A"], {"A": [1, 2]})
    with pytest.raises(DuplicateVariable):
        word_search_csp(["JOE", "JOE"], generate_grid(5, 5, seed=0))
    assert issubclass(DuplicateVariable, CSPError)


def test_solutions_rejects_bad_assignment_before_iteration():
    csp = australia_csp()
    with pytest.raises(InvalidAssignment):
        csp.solutions({"Atlantis": "red"})
    with pytest.raises(InvalidAssignment):
        csp.solutions({"Victoria": "purple"})
