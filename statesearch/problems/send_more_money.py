# statesearch/problems/send_more_money.py
# Cryptarithm SEND + MORE = MONEY: each letter is a distinct digit.
from __future__ import annotations
from typing import Mapping, Sequence

from ..csp import CSP, AllDifferentConstraint, Constraint

LETTERS = ("S", "E", "N", "D", "M", "O", "R", "Y")


def _word_value(word: str, assignment: Mapping[str, int]) -> int:
    value = 0
    for letter in word:
        value = value * 10 + assignment[letter]
    return value


class SendMoreMoneyConstraint(Constraint[str, int]):
    """The column arithmetic; checked only once every letter has a digit."""

    def __init__(self, letters: Sequence[str] = LETTERS) -> None:
        super().__init__(letters)

    def satisfied(self, assignment: Mapping[str, int]) -> bool:
        if not self.fully_assigned(assignment):
            return True
        send = _word_value("SEND", assignment)
        more = _word_value("MORE", assignment)
        money = _word_value("MONEY", assignment)
        return send + more == money


def send_more_money_csp() -> CSP[str, int]:
    digits = {letter: list(range(10)) for letter in LETTERS}
    digits["M"] = [1]  # so we don't get answers starting with a 0
    csp: CSP[str, int] = CSP(LETTERS, digits)
    csp.add_constraint(AllDifferentConstraint(LETTERS))
    csp.add_constraint(SendMoreMoneyConstraint(LETTERS))
    return csp


if __name__ == "__main__":
    solution = send_more_money_csp().backtracking_search()
    if solution is None:
        print("No solution found!")
    else:
        for letter in LETTERS:
            print(f"{letter}: {solution[letter]}")
