# statesearch/problems/dna.py
# Codon lookup in a gene, linear vs. binary containment.
from __future__ import annotations
from enum import IntEnum
from typing import List, Tuple

from ..core.utils import binary_contains, linear_contains


class Nucleotide(IntEnum):
    A = 0
    C = 1
    G = 2
    T = 3


Codon = Tuple[Nucleotide, Nucleotide, Nucleotide]
Gene = List[Codon]


def string_to_gene(s: str) -> Gene:
    """Split into codons of three; a trailing partial codon is dropped."""
    gene: Gene = []
    for i in range(0, len(s) - 2, 3):
        try:
            codon = tuple(Nucleotide[ch] for ch in s[i:i + 3])
        except KeyError as exc:
            raise ValueError(f"Invalid nucleotide {exc.args[0]!r} at codon {i // 3}") from None
        gene.append(codon)  # type: ignore[arg-type]
    return gene


def string_to_codon(s: str) -> Codon:
    if len(s) != 3:
        raise ValueError(f"a codon is three nucleotides, got {s!r}")
    return string_to_gene(s)[0]


if __name__ == "__main__":
    gene_str = "ACGTGGCTCTCTAACGTACGTACGTACGGGGTTTATATATACCCTAGGACTCCCTTT"
    my_gene = string_to_gene(gene_str)
    acg = string_to_codon("ACG")
    gat = string_to_codon("GAT")
    print(linear_contains(my_gene, acg))  # True
    print(linear_contains(my_gene, gat))  # False
    my_sorted_gene = sorted(my_gene)
    print(binary_contains(my_sorted_gene, acg))  # True
    print(binary_contains(my_sorted_gene, gat))  # False
