"""
Grammar engine - rewrites a sentence one generation at a time.

Symbols without a rule are copied unchanged, which is how the turtle
control symbols (+ - [ ] ^ &) survive rewriting.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping

from .errors import require


def advance(sentence: str, rules: Mapping[str, str]) -> str:
    """Produce the next generation of sentence. Pure and deterministic."""
    return "".join(rules.get(c, c) for c in sentence)


def parse_rules(cmd: str) -> tuple:
    """
    Parse a compact L-system description.

    The first field is the axiom, the remaining ';' separated fields are rules:
    ```
    B;
    B=A+A--A+A;
    A=F+F--F+F;
    ```
    Returns (axiom, rules).
    """
    fields = cmd.split(';')
    axiom = fields[0].strip()
    rules: Dict[str, str] = {}

    for field in fields[1:]:
        field = field.strip()
        if not field:
            continue
        require('=' in field, f"rule '{field}' must have the form X=replacement")
        key, repl = field.split('=', 1)
        key = key.strip()
        require(len(key) == 1, f"rule key must be a single symbol: '{key}'")
        rules[key] = repl.strip()

    return axiom, rules


class Grammar:
    def __init__(self, axiom: str, rules: Mapping[str, str]):
        require(isinstance(axiom, str) and len(axiom) > 0, "axiom must be a non-empty string")
        for key, repl in rules.items():
            require(isinstance(key, str) and len(key) == 1,
                    f"rule key must be a single symbol: {key!r}")
            require(isinstance(repl, str), f"replacement for '{key}' must be a string")

        self.axiom = axiom
        self.rules: Mapping[str, str] = MappingProxyType(dict(rules))

    @classmethod
    def from_string(cls, cmd: str) -> 'Grammar':
        axiom, rules = parse_rules(cmd)
        return cls(axiom, rules)

    def advance(self, sentence: str) -> str:
        return advance(sentence, self.rules)

    def generation(self, k: int) -> str:
        """Sentence after k rewrites of the axiom."""
        require(isinstance(k, int) and k >= 0, "generation must be a non-negative integer")
        sentence = self.axiom
        for _ in range(k):
            sentence = self.advance(sentence)
        return sentence

    def generations(self) -> Iterator[str]:
        sentence = self.axiom
        while True:
            yield sentence
            sentence = self.advance(sentence)

    def __repr__(self) -> str:
        rules = ", ".join(f"{k}->{v}" for k, v in self.rules.items())
        return f"Grammar(axiom={self.axiom!r}, rules=[{rules}])"
