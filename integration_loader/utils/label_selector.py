from collections.abc import Mapping
from enum import Enum

from pydantic import Field
from pydantic.dataclasses import dataclass


class Operator(str, Enum):
    IN = "in"
    NOT_IN = "notin"
    EXISTS = "exists"
    DOES_NOT_EXIST = "!"


@dataclass(frozen=True)
class Requirement:
    key: str
    operator: Operator
    values: tuple[str, ...] = ()

    def matches(self, labels: Mapping[str, str]) -> bool:
        match self.operator:
            case Operator.IN:
                return self.key in labels and labels[self.key] in self.values
            case Operator.NOT_IN:
                # a missing key satisfies notin
                return labels.get(self.key) not in self.values
            case Operator.EXISTS:
                return self.key in labels
            case Operator.DOES_NOT_EXIST:
                return self.key not in labels

    def __str__(self) -> str:
        match self.operator:
            case Operator.IN | Operator.NOT_IN:
                return f"{self.key} {self.operator.value} ({','.join(self.values)})"
            case Operator.EXISTS:
                return self.key
            case Operator.DOES_NOT_EXIST:
                return f"!{self.key}"


@dataclass(frozen=True)
class LabelSelector:
    """Label query with Kubernetes selector semantics.

    ``match_labels`` are ANDed equality terms, ``requirements`` are set based
    terms. ``str()`` renders the ``labelSelector`` query parameter accepted by
    the API server; ``matches()`` evaluates the same predicate locally.
    """

    match_labels: dict[str, str] = Field(default_factory=dict)
    requirements: tuple[Requirement, ...] = ()

    def matches(self, labels: Mapping[str, str] | None) -> bool:
        labels = labels or {}
        if any(labels.get(key) != value for key, value in self.match_labels.items()):
            return False
        return all(r.matches(labels) for r in self.requirements)

    def __str__(self) -> str:
        terms = [f"{key}={value}" for key, value in self.match_labels.items()]
        terms.extend(str(r) for r in self.requirements)
        return ",".join(terms)

    def __bool__(self) -> bool:
        return bool(self.match_labels or self.requirements)


def not_in(key: str, *values: str) -> Requirement:
    return Requirement(key=key, operator=Operator.NOT_IN, values=values)
