"""Crew transactions: training, morale, recruitment and heir selection."""

from ..core.enums import DeltaMode, SkillType
from ..game.notifications import crew_message
from ..game.snapshot import GameSnapshot, StateChanges, replace_crew_member
from .base_action import ActionOutcome, BaseAction, TransactionContext, ValidationResult
from .validators import ActionValidator


class TrainCrewAction(BaseAction):
    """Pay for training; one random crew member gains a level in one random skill.

    A skill already at the maximum stays there, but the training is still
    paid for and still reported as a success.
    """

    def __init__(self):
        super().__init__("train_crew")

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_crew_training(snapshot, context.settings, context.ledger)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        resources = context.ledger.apply_delta(
            snapshot.resources, context.settings.training_cost, DeltaMode.SUBTRACT)

        member = context.generator.choice(snapshot.crew)
        skill = context.generator.choice(list(SkillType))
        trained = member.trained(skill)
        level = trained.skills.get(skill)

        if level == member.skills.get(skill):
            details = f"{skill.value} already at mastery ({level})"
        else:
            details = f"{skill.value} is now {level}"

        return ActionOutcome.success(
            crew_message("trained", member.name, details),
            StateChanges(resources=resources, crew=replace_crew_member(snapshot.crew, trained)),
            {"crew_id": member.id, "skill": skill.value, "level": level},
        )


class BoostMoraleAction(BaseAction):
    """Pay once to raise every crew member's morale, clamped at the maximum."""

    def __init__(self):
        super().__init__("boost_morale")

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_morale_boost(snapshot, context.settings, context.ledger)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        resources = context.ledger.apply_delta(
            snapshot.resources, context.settings.morale_boost_cost, DeltaMode.SUBTRACT)
        boost = context.settings.morale_boost_amount
        crew = tuple(member.with_morale_boost(boost) for member in snapshot.crew)
        return ActionOutcome.success(
            "Crew morale improved!",
            StateChanges(resources=resources, crew=crew),
            {"boost": boost, "crew_count": len(crew)},
        )


class RecruitCrewAction(BaseAction):
    """Hire a newly generated crew member if the quarters have room."""

    def __init__(self):
        super().__init__("recruit_crew")

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_crew_recruitment(snapshot, context.settings, context.ledger)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        resources = context.ledger.apply_delta(
            snapshot.resources, context.settings.recruitment_cost, DeltaMode.SUBTRACT)
        recruit = context.generator.generate_crew_member()
        return ActionOutcome.success(
            crew_message("recruited", recruit.name),
            StateChanges(resources=resources, crew=snapshot.crew + (recruit,)),
            {"crew_id": recruit.id, "role": recruit.role.value},
        )


class SelectHeirAction(BaseAction):
    """Flag one eligible crew member as heir and clear the flag everywhere else."""

    def __init__(self, crew_id: str):
        super().__init__("select_heir")
        self.crew_id = crew_id

    def validate(self, snapshot: GameSnapshot, context: TransactionContext) -> ValidationResult:
        return ActionValidator.validate_heir_selection(snapshot, context.settings, self.crew_id)

    def apply(self, snapshot: GameSnapshot, context: TransactionContext) -> ActionOutcome:
        crew = tuple(m.with_heir_flag(m.id == self.crew_id) for m in snapshot.crew)
        heir = snapshot.crew_member(self.crew_id)
        family = snapshot.legacy.family_name
        details = f"named heir to the {family} legacy" if family else "named heir"
        return ActionOutcome.success(
            crew_message("promoted", heir.name, details),
            StateChanges(crew=crew),
            {"crew_id": heir.id},
        )

    def get_action_data(self):
        data = super().get_action_data()
        data["crew_id"] = self.crew_id
        return data
