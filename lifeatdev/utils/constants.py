# utils/constants.py


class Bounds:
    """Clamping ranges for PlayerStats."""
    MIN_STAT = 0
    MAX_STRESS = 100
    MAX_ENERGY = 100
    MAX_SKILL = 1000  # coding and reputation
    WEEKS_PER_YEAR = 52


class Lifecycle:
    STARTING_AGE = 18
    ACTION_HISTORY_SIZE = 24
    FAMILY_SUPPORT_YEARS = 4


class GameOverRules:
    BURNOUT_STRESS = 100
    # Bankrupt when money is at or below this after rent
    BANKRUPTCY_MONEY = 0


class InterviewRules:
    QUESTIONS_PER_SESSION = 3
    PASS_THRESHOLD = 2
    OPTIONS_PER_QUESTION = 4

    # Job level -> highest template difficulty allowed
    @staticmethod
    def difficulty_ceiling(level: int) -> int:
        if level >= 4:
            return 3
        if level >= 3:
            return 2
        return 1


class ScoreRules:
    BASE_POINTS = 100
    JOB_LEVEL_BONUS = {1: 50, 2: 150, 3: 300, 4: 500}
    WEALTH_FACTOR = 40
    CODING_FACTOR = 1.5
    REPUTATION_FACTOR = 2

    MAX_EFFICIENCY_BONUS = 200
    OPTIMAL_YEARS = 4
    EFFICIENCY_DECAY_PER_YEAR = 10
    LONGEVITY_PER_YEAR = 5
    MAX_LONGEVITY_BONUS = 100

    MULTIPLIER_SPECIAL_WIN = 2.5
    MULTIPLIER_VICTORY = 2.0
    MULTIPLIER_BURNOUT = 0.5
    MULTIPLIER_BANKRUPTCY = 0.3


class SummaryRules:
    WEEKS_BUCKET = 50
    SUCCESS_WEEKS = 100
    AVERAGE_WEEKS = 50


class Emojis:
    """Shared emoji set for log lines."""
    SUCCESS = "✅"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    PARTY = "🎉"
    BRIEFCASE = "💼"
    GRADUATE = "🎓"
    MONEY_BAG = "💰"
