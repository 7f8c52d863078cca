# data/narrative.py
"""End-of-game text: offline summaries, hidden-victory stories, player tags."""
from __future__ import annotations

# Offline career summaries, picked by score bucket
SUMMARY_TEMPLATES: dict[str, list[str]] = {
    "success": [
        "You started as a humble {{path}} developer and ascended to level {{level}}.",
        "Through {{weeks}} weeks of dedication, you built a legendary career.",
        "Your code was clean, your deploys were smooth, and your stakeholders were happy.",
        "You achieved what many only dream of: work-life balance and financial freedom.",
        "The terminal may have closed, but your legacy lives on in production.",
        "GG. You beat the game of life.",
    ],
    "average": [
        "You walked the path of a {{path}} developer, reaching level {{level}}.",
        "After {{weeks}} weeks, you survived the grind, barely.",
        "Some bugs were fixed, some features shipped, some deadlines missed.",
        "You were neither a hero nor a villain, just another dev in the machine.",
        "The game ended, but you're left wondering: what if you'd made different choices?",
        "Press F to pay respects to your mediocre career.",
    ],
    "burnout": [
        "You tried to become a {{path}} legend, but made it only to level {{level}}.",
        "After {{weeks}} weeks of endless sprints and crunch time, you broke.",
        "The pull requests piled up. The tech debt consumed everything. The stress won.",
        "You learned the hard way: no job is worth your mental health.",
        "The terminal flickers one last time before going dark.",
        "Game Over. Remember to take breaks, touch grass, and log off sometimes.",
    ],
}

# Story told for each way a game can end
SUMMARY_TIER_BY_OUTCOME: dict[str, str] = {
    "victory": "success",
    "bankruptcy": "average",
    "burnout": "burnout",
}

# ==================== HIDDEN VICTORY ====================
SPECIAL_WIN_EVENTS: list[str] = [
    "Your rich friend offered you a CTO role in his stealth startup.",
    "A billionaire acquired your side-project idea outright.",
    "An open-source tool you built quietly became industry standard.",
    "You were headhunted to architect a once-in-a-decade system.",
    "A long-ignored blog post sparked a global tech movement.",
]

# Minimum counts over the last 24 tracked actions
SPECIAL_WIN_PATTERN: dict[str, int] = {
    "side-project": 3,
    "network-online": 3,
    "grind-leetcode": 2,
}

SPECIAL_WIN_GATES = {
    "min_years_played": 1,
    "min_history": 8,
    "min_coding": 100,
    "min_reputation": 100,
    "max_stress": 60,
    "min_energy": 40,
    "min_money": 100,
}

# ==================== PLAYER TAGS ====================
TAGS: dict[str, dict] = {
    "ghost": {"label": "The Ghost", "emoji": "👻", "description": "Massive skills but nobody knows who you are"},
    "influencer": {"label": "LinkedIn Influencer", "emoji": "📢", "description": "Famous for talking about code, not writing it"},
    "ten_x": {"label": "10x Engineer", "emoji": "🦄", "description": "The mythical developer everyone wants to hire"},
    "script_kiddie": {"label": "Script Kiddie", "emoji": "👶", "description": "Still learning the basics"},
    "fire": {"label": "F.I.R.E. Achieved", "emoji": "🔥", "description": "Financially Independent, Retire Early"},
    "golden_handcuffs": {"label": "Golden Handcuffs", "emoji": "🔒", "description": "Big salary but lifestyle inflation got you"},
    "ramen": {"label": "Ramen Profitable", "emoji": "🍜", "description": "Making ends meet through sheer willpower"},
    "zen": {"label": "Zen Master", "emoji": "🧘", "description": "Found work-life balance in tech"},
    "caffeine": {"label": "Caffeine IV", "emoji": "☕", "description": "Running on coffee and deadlines"},
    "burnout_speedrun": {"label": "Burnout Speedrun", "emoji": "🚑", "description": "Burned out in record time"},
    "job_hopper": {"label": "Job Hopper", "emoji": "🦘", "description": "Never stayed anywhere long"},
    "eternal_student": {"label": "Eternal Student", "emoji": "🎓", "description": "Still in school after all these years"},
    "nepo_baby": {"label": "Nepo Baby", "emoji": "🍼", "description": "Started with a safety net"},
    "coffee_addict": {"label": "Coffee Addict", "emoji": "🤪", "description": "Consumed {count}+ coffee binges"},
}

# One tag per final path
PATH_TAGS: dict[str, dict] = {
    "corporate": {"label": "Corporate Drone", "emoji": "🏢", "description": "Climbed the corporate ladder"},
    "management": {"label": "The Suit", "emoji": "👔", "description": "Traded coding for meetings"},
    "hustler": {"label": "Lone Wolf", "emoji": "🐺", "description": "Did it your own way"},
    "ic": {"label": "Architect", "emoji": "📐", "description": "Master of technical excellence"},
    "specialist": {"label": "Architect", "emoji": "📐", "description": "Master of technical excellence"},
    "business": {"label": "Visionary", "emoji": "🚀", "description": "Built something bigger than code"},
}

# ==================== GAME OVER ====================
GAME_OVER_MESSAGES: dict[str, str] = {
    "burnout": "You burned out. The grind consumed you. Maybe touch grass next time?",
    "victory": "You made it! {title} achieved. Total earned: {total_earned}",
    "bankruptcy": "You're broke. Can't pay rent. Game over. Should've freelanced more.",
}
