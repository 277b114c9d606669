"""Bounded-random generation of crew members and planets."""

import random
import string
import uuid
from typing import Callable, List, Optional, Sequence

from ..core.constants import (
    CREW_BACKGROUNDS, CREW_FIRST_NAMES, CREW_LAST_NAMES, GENERATED_PLANET_TYPES,
    PLANET_RESOURCE_TAGS, RECRUITABLE_ROLES
)
from ..core.enums import SkillType
from ..entities.crew import CrewMember, CrewSkills
from ..entities.galaxy import Planet


def new_crew_id() -> str:
    return f"crew-{uuid.uuid4().hex[:12]}"


class EntityGenerator:
    """Creates crew members and planets from configured ranges.

    All randomness comes from ``rng``. Only ``randint`` and ``choice`` are
    used, so tests can pass any object that offers those two methods.
    """

    def __init__(self, settings, rng: Optional[random.Random] = None,
                 id_factory: Callable[[], str] = new_crew_id):
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.id_factory = id_factory

    def randint(self, low: int, high: int) -> int:
        return self.rng.randint(low, high)

    def choice(self, options: Sequence):
        return self.rng.choice(options)

    def generate_crew_member(self) -> CrewMember:
        """Draw a fresh recruit. Recruits are never heirs."""
        low, high = self.settings.recruit_skill_range
        skills = CrewSkills(**{skill.value: self.randint(low, high) for skill in SkillType})
        return CrewMember(
            id=self.id_factory(),
            name=f"{self.choice(CREW_FIRST_NAMES)} {self.choice(CREW_LAST_NAMES)}",
            role=self.choice(RECRUITABLE_ROLES),
            skills=skills,
            morale=self.randint(*self.settings.recruit_morale_range),
            background=self.choice(CREW_BACKGROUNDS),
            age=self.randint(*self.settings.recruit_age_range),
            is_heir=False,
        )

    def generate_planet_resources(self) -> List[str]:
        """Draw tags for one planet.

        A repeated draw is dropped, not redrawn, so a planet can end up with
        fewer tags than the count rolled.
        """
        count = self.randint(*self.settings.resources_per_planet_range)
        tags: List[str] = []
        for _ in range(count):
            tag = self.choice(PLANET_RESOURCE_TAGS)
            if tag not in tags:
                tags.append(tag)
        return tags

    def generate_planets(self) -> List[Planet]:
        """Draw the planets of a freshly explored system, named Planet A, B, ..."""
        count = self.randint(*self.settings.planets_per_system_range)
        planets = []
        for index in range(count):
            planet_type = self.choice(GENERATED_PLANET_TYPES)
            resources = self.generate_planet_resources()
            planets.append(Planet(
                name=f"Planet {string.ascii_uppercase[index]}",
                planet_type=planet_type,
                resources=tuple(resources),
                developed=False,
            ))
        return planets
