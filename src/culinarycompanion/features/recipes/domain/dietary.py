from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Pattern, Sequence, Tuple

KNOWN_RESTRICTIONS = (
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Dairy-Free",
    "Keto",
    "Paleo",
    "Low-Carb",
    "Low-Sodium",
    "Nut-Free",
    "Diabetic-Friendly",
)

_CANONICAL = {r.lower(): r for r in KNOWN_RESTRICTIONS}


def _family(*keywords: str) -> Pattern[str]:
    # Any word containing a keyword is replaced as a whole ("meatballs", "buttermilk").
    return re.compile(r"\w*(?:%s)\w*" % "|".join(keywords), re.IGNORECASE)


@dataclass(frozen=True)
class SubstitutionRule:
    triggers: Tuple[str, ...]
    pattern: Pattern[str]
    replacement: str
    note: str
    follow_up_note: str

    def applies_to(self, restrictions: Sequence[str]) -> bool:
        return any(r in restrictions for r in self.triggers)


RULES = (
    SubstitutionRule(
        triggers=("Vegetarian", "Vegan"),
        pattern=_family("chicken", "beef", "pork", "fish", "meat", "lamb", "turkey"),
        replacement="plant-based protein",
        note="🌱 Adapted for {restrictions}: Replaced animal proteins with plant-based alternatives like tofu, tempeh, or legumes.",
        follow_up_note="Also replacing animal proteins with plant-based alternatives.",
    ),
    SubstitutionRule(
        triggers=("Dairy-Free",),
        pattern=_family("cheese", "milk", "butter", "cream", "yogurt"),
        replacement="dairy-free alternative",
        note="🥥 Using dairy-free alternatives like coconut milk, cashew cheese, and plant-based butter.",
        follow_up_note="Also using dairy-free substitutes.",
    ),
    SubstitutionRule(
        triggers=("Gluten-Free",),
        pattern=_family("bread", "flour", "pasta", "wheat"),
        replacement="gluten-free alternative",
        note="🌾 Using gluten-free flour and alternatives to ensure your dish is safe and delicious.",
        follow_up_note="Plus gluten-free options.",
    ),
)


@dataclass(frozen=True)
class DietaryAdaptation:
    ingredients: str
    notes: List[str] = field(default_factory=list)

    @property
    def note(self) -> str:
        return " ".join(self.notes)

    @property
    def adapted(self) -> bool:
        return bool(self.notes)


def canonical_restrictions(labels: Optional[Iterable[str]]) -> List[str]:
    """
    Map labels onto the known vocabulary (case-insensitive), keeping order and
    dropping duplicates. Unknown labels are kept verbatim.
    """
    out: List[str] = []
    for label in labels or []:
        name = _CANONICAL.get(str(label).strip().lower(), str(label).strip())
        if name and name not in out:
            out.append(name)
    return out


def adapt_for_diet(normalized: str, restrictions: Optional[Iterable[str]]) -> DietaryAdaptation:
    """
    Rewrite a normalized ingredient string for the declared restrictions.

    Each rule substitutes over the already-adapted string but decides whether
    to add its note by looking at the unmodified input. Restrictions without a
    rule (Keto, Paleo, ...) have no effect.
    """
    declared = canonical_restrictions(restrictions)
    current = normalized or ""
    notes: List[str] = []
    if not declared:
        return DietaryAdaptation(ingredients=current)

    for rule in RULES:
        if not rule.applies_to(declared):
            continue
        if rule.pattern.search(normalized or ""):
            current = rule.pattern.sub(rule.replacement, current)
            if notes:
                notes.append(rule.follow_up_note)
            else:
                notes.append(rule.note.format(restrictions=" & ".join(declared)))
    return DietaryAdaptation(ingredients=current, notes=notes)
