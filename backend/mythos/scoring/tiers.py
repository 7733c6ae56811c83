"""Achievement titles and point-total resolution."""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Sequence

from .errors import NoTiersConfigured


@dataclass(frozen=True)
class Tier:
    """A title unlocked once a student's total reaches ``points``."""
    points: int
    title: str
    message: str = ""
    image_url: str = ""


DEFAULT_TIERS = (
    Tier(0, "Gnome", "Congratulations! Your journey has begun! As a Gnome, you are a small, earth-dwelling spirit, and your adventure is just starting to take root."),
    Tier(20, "Gremlin", "Congratulations! You've earned the title of Gremlin. Your mischievous nature and ability to cause minor disruptions are making an impact."),
    Tier(30, "Kobold", "Congratulations! You have achieved the title of Kobold. Like this small, house-dwelling spirit, you are showing your presence and building your influence."),
    Tier(35, "Dryad", "Congratulations! For reaching 35 points, you are now a Dryad. Your connection to your environment and ability to grow stronger are becoming apparent."),
    Tier(38, "Satyr", "Congratulations! You've earned the title of Satyr. Your playful, half-goat nature is now recognized, a sign of your spirited approach to the game."),
    Tier(40, "Gorgon", "Congratulations! You've reached 40 points and are now a Gorgon. While a monstrous being, you are showing your power and ability to freeze your opponents in their tracks."),
    Tier(42, "The Answer to the Ultimate Question", "You have achieved the ultimate answer of 42 points and earned the title of The Answer to the Ultimate Question. Be sure to never occupy the same universe as the Ultimate Question."),
    Tier(45, "Griffin", "Congratulations! For reaching 45 points, you are now a Griffin. Your powerful physical presence and dominance are becoming undeniable."),
    Tier(48, "Minotaur", "Congratulations! You have achieved the title of Minotaur. Like this strong, formidable beast, you're a force to be reckoned with in the labyrinth of challenges."),
    Tier(50, "The Sphinx", "Congratulations! You've earned the ultimate title of The Sphinx. Your intelligence and ability to outsmart your opponents are now your greatest weapons."),
    Tier(52, "Hydra", "Congratulations! You've reached 52 points and are now a Hydra. Your ability to regenerate and bounce back from challenges is unmatched."),
    Tier(55, "Fenrir", "Congratulations! You have achieved the title of Fenrir. A powerful, giant wolf, you are feared by your opponents and are poised to challenge even the strongest."),
    Tier(58, "Valkyrie", "Congratulations! For reaching 58 points, you are now a Valkyrie. Your prowess in battle is a sight to behold, guiding the fallen and proving your dominance."),
    Tier(60, "The Chimera", "Congratulations! You have earned the title of The Chimera. Your diverse skills and abilities are blending together into something truly monstrous and unique."),
    Tier(62, "The Kraken", "Congratulations! You've reached 62 points and are now known as The Kraken. Your influence is growing, and your power can be felt across the entire game."),
    Tier(65, "Dragon", "Congratulations! With 65 points, you have reached a new level of power and earned the legendary title of Dragon. You are an awe-inspiring force of nature, a creature of myth and legend, whose might is known throughout the land."),
    Tier(68, "The Djinn", "Congratulations! You have earned the title of The Djinn. Your control over magic and your reality-bending skills are truly powerful."),
    Tier(70, "Anubis", "Congratulations! With 70 points, you are now known as Anubis. Your mastery of the darkest parts of the game and your ability to guide others through the unknown is unmatched."),
    Tier(75, "Hel", "Congratulations! You have earned the title of Hel. Like the ruler of the underworld, you hold absolute power over those who have been defeated."),
    Tier(80, "Odin", "Congratulations! For reaching 80 points, you are now Odin. Your wisdom, command, and ability to see all make you a true leader and a god among men."),
    Tier(85, "Shiva", "Congratulations! You have achieved the title of Shiva the Destroyer. You are a supreme force of destruction and transformation, changing the game with your every move."),
    Tier(90, "Amaterasu", "Congratulations! For reaching 90 points, you have achieved the divine title of Amaterasu. Like the supreme sun goddess, your influence is a source of ultimate life and power, illuminating all who cross your path"),
    Tier(95, "Zeus", "Congratulations! You've earned the ultimate title of Zeus, King of Olympus. You command the sky, and your power over all aspects of the game is undeniable."),
    Tier(100, "Chaos", "Congratulations! You've reached the pinnacle with 100 points and earned the ultimate title of Chaos. You are the primordial force, the beginning and the end of all things. Your dominance is complete."),
)

DEFAULT_TITLE = DEFAULT_TIERS[0].title


def validate_tier_table(tiers: Sequence[Tier]) -> None:
    """Check that thresholds strictly increase and start at zero.

    Raises:
        NoTiersConfigured: If the table is empty.
        ValueError: If the table has no zero-point entry or is out of order.
    """
    if not tiers:
        raise NoTiersConfigured()
    thresholds = [tier.points for tier in tiers]
    if any(a >= b for a, b in zip(thresholds, thresholds[1:])):
        raise ValueError("Title thresholds must be strictly increasing")
    if thresholds[0] != 0:
        raise ValueError("The title table must include a 0-point entry")


def resolve_tier(total_points: int, tiers: Sequence[Tier]) -> Tier:
    """Return the tier with the largest threshold not above ``total_points``.

    ``tiers`` must be sorted by ascending threshold. Totals below the
    lowest threshold resolve to the lowest tier.
    """
    if not tiers:
        raise NoTiersConfigured()
    index = bisect_right([tier.points for tier in tiers], total_points)
    return tiers[max(index - 1, 0)]
