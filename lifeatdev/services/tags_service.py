# services/tags_service.py
from __future__ import annotations

from typing import List

from ..data.jobs import FAMILY_FUNDED_STUDENT_JOB_ID
from ..data.narrative import PATH_TAGS, TAGS
from ..models import PlayerStats, PlayerTag


def _tag(key: str, **values) -> PlayerTag:
    raw = TAGS[key]
    return PlayerTag(
        label=raw["label"],
        emoji=raw["emoji"],
        description=raw["description"].format(**values) if values else raw["description"],
    )


def get_player_tags(stats: PlayerStats) -> List[PlayerTag]:
    """End-screen flavour tags describing how the game was played."""
    tags: List[PlayerTag] = []
    coding = stats.coding
    reputation = stats.reputation
    job = stats.current_job

    # Skill vs fame
    if coding > 800 and reputation < 300:
        tags.append(_tag("ghost"))
    if coding < 400 and reputation > 700:
        tags.append(_tag("influencer"))
    if coding > 850 and reputation > 850:
        tags.append(_tag("ten_x"))
    if coding < 200 and reputation < 200:
        tags.append(_tag("script_kiddie"))

    # Money
    if stats.money > 1_000_000:
        tags.append(_tag("fire"))
    if job.yearly_pay > 150_000 and stats.money < 10_000:
        tags.append(_tag("golden_handcuffs"))
    if job.yearly_pay < 40_000 and stats.years_worked > 5:
        tags.append(_tag("ramen"))

    # Mental state
    if stats.stress < 20 and stats.years_worked > 10:
        tags.append(_tag("zen"))
    if stats.stress > 90 and coding > 700:
        tags.append(_tag("caffeine"))
    if stats.stress > 95 and stats.years_worked < 3:
        tags.append(_tag("burnout_speedrun"))

    path_tag = PATH_TAGS.get(job.path.value)
    if path_tag:
        tags.append(PlayerTag(**path_tag))

    # Special
    if stats.job_changes > 5:
        tags.append(_tag("job_hopper"))
    if stats.years_worked > 6 and job.is_student:
        tags.append(_tag("eternal_student"))
    if stats.starting_job_id == FAMILY_FUNDED_STUDENT_JOB_ID:
        tags.append(_tag("nepo_baby"))

    coffee_count = stats.coffee_binges
    if coffee_count > 50:
        tags.append(_tag("coffee_addict", count=coffee_count))

    return tags
