"""Crew member entity for Stellar Legacy."""

from dataclasses import dataclass, field, replace
from typing import Dict, Any

from ..core.enums import CrewRole, SkillType
from ..core.constants import MAX_SKILL_LEVEL, MAX_MORALE
from ..utils.validation import GameValidator, Validator
from .base import BaseEntity


@dataclass(frozen=True)
class CrewSkills(BaseEntity):
    """Skill levels of a crew member, each bounded to [0, 10]."""

    engineering: int = 0
    navigation: int = 0
    combat: int = 0
    diplomacy: int = 0
    trade: int = 0

    def validate(self) -> None:
        for skill in SkillType:
            GameValidator.validate_skill_level(self.get(skill), skill.value)

    def get(self, skill: SkillType) -> int:
        return getattr(self, skill.value)

    def improved(self, skill: SkillType, amount: int = 1) -> "CrewSkills":
        """Raise one skill, clamped at the maximum level."""
        return replace(self, **{skill.value: min(MAX_SKILL_LEVEL, self.get(skill) + amount)})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrewSkills":
        return cls(**{skill.value: data.get(skill.value, 0) for skill in SkillType})


@dataclass(frozen=True)
class CrewMember(BaseEntity):
    """Represents a member of the ship's crew."""

    id: str
    name: str
    role: CrewRole
    skills: CrewSkills = field(default_factory=CrewSkills)
    morale: int = 50
    background: str = ""
    age: int = 30
    is_heir: bool = False

    def validate(self) -> None:
        """Validate crew member state."""
        Validator.validate_non_empty_string(self.id, "id")
        Validator.validate_non_empty_string(self.name, "name")
        GameValidator.validate_role(self.role)
        Validator.validate_type(self.skills, CrewSkills, "skills")
        GameValidator.validate_morale(self.morale)
        Validator.validate_type(self.background, str, "background")
        GameValidator.validate_age(self.age)
        Validator.validate_type(self.is_heir, bool, "is_heir")

    @property
    def is_captain(self) -> bool:
        return self.role == CrewRole.CAPTAIN

    def trained(self, skill: SkillType) -> "CrewMember":
        return replace(self, skills=self.skills.improved(skill))

    def with_morale_boost(self, amount: int) -> "CrewMember":
        return replace(self, morale=min(MAX_MORALE, self.morale + amount))

    def with_heir_flag(self, is_heir: bool) -> "CrewMember":
        if self.is_heir == is_heir:
            return self
        return replace(self, is_heir=is_heir)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CrewMember":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            role=CrewRole(data["role"]),
            skills=CrewSkills.from_dict(data.get("skills", {})),
            morale=data["morale"],
            background=data.get("background", ""),
            age=data["age"],
            is_heir=data.get("is_heir", False),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.role.value}, age {self.age})"
