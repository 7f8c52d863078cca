# data/actions.py
"""
Weekly actions the player spends their 52 weeks on.

cost:    what the action takes (weeks, energy, stress, money)
reward:  what it gives back (coding, reputation, money, energy, stress)
requirements: optional min_energy / min_money / min_reputation gates
"""
from __future__ import annotations

ACTIONS: dict[str, dict] = {
    # ==================== WORK ====================
    "grind-leetcode": {
        "name": "Grind LeetCode",
        "description": "Practice algorithms and data structures. The eternal grind.",
        "category": "work",
        "cost": {"weeks": 1, "energy": 15, "stress": 10, "money": 0},
        "reward": {"coding": 5},
        "requirements": {"min_energy": 15},
    },
    "side-project": {
        "name": "Build Side Project",
        "description": "Create something cool. A solid 3-week investment.",
        "category": "work",
        "cost": {"weeks": 3, "energy": 30, "stress": 10, "money": 0},
        "reward": {"coding": 8, "reputation": 5},
        "requirements": {"min_energy": 30},
        "multi_week": True,
    },
    "freelance-gig": {
        "name": "Freelance Gig",
        "description": "Full client project. Income scales with Coding & Reputation.",
        "category": "work",
        "cost": {"weeks": 4, "energy": 25, "stress": 10, "money": 0},
        "reward": {"coding": 10, "reputation": 2, "money": 550},
        "requirements": {"min_energy": 25},
    },
    "hackathon": {
        "name": "Attend Hackathon",
        "description": "Intense weekend event plus recovery time.",
        "category": "work",
        "cost": {"weeks": 2, "energy": 40, "stress": 25, "money": 0},
        "reward": {"coding": 20, "reputation": 5},
        "requirements": {"min_energy": 40},
    },

    # ==================== SHOP (recovery) ====================
    "sleep-in": {
        "name": "Sleep In",
        "description": "Take a week off to rest and recharge.",
        "category": "shop",
        "cost": {"weeks": 1, "energy": 0, "stress": 0, "money": 0},
        "reward": {"energy": 50, "stress": -10},
    },
    "coffee-binge": {
        "name": "Coffee Binge",
        "description": "Instant energy boost. No time cost, but increases stress.",
        "category": "shop",
        "cost": {"weeks": 0, "energy": 0, "stress": 10, "money": 15},
        "reward": {"energy": 25},
        "requirements": {"min_money": 15},
    },
    "vacation": {
        "name": "Touch Grass (Vacation)",
        "description": "Take 3 weeks off to truly reset. Expensive but worth it.",
        "category": "shop",
        "cost": {"weeks": 3, "energy": 0, "stress": 0, "money": 1000},
        "reward": {"energy": 100, "stress": -50},
        "requirements": {"min_money": 1000},
        "multi_week": True,
    },

    # ==================== INVEST ====================
    "network-online": {
        "name": "Network Online",
        "description": "LinkedIn premium, Twitter engagement, conference tickets.",
        "category": "invest",
        "cost": {"weeks": 1, "energy": 5, "stress": 0, "money": 100},
        "reward": {"reputation": 10},
        "requirements": {"min_energy": 5, "min_money": 100},
    },
    "job-hunt": {
        "name": "Job Hunt / Apply",
        "description": "Apply to jobs and take interviews. Stressful but necessary.",
        "category": "invest",
        "cost": {"weeks": 1, "energy": 10, "stress": 20, "money": 0},
        "reward": {},
        "requirements": {"min_energy": 10},
    },
    "consult-mentor": {
        "name": "Consult/Mentor",
        "description": "Share your expertise for pay. Requires high reputation.",
        "category": "invest",
        "cost": {"weeks": 1, "energy": 20, "stress": 0, "money": 0},
        "reward": {"money": 1500},
        "requirements": {"min_energy": 20, "min_reputation": 600},
    },
}

ACTION_CATEGORIES = ("work", "shop", "invest")

JOB_HUNT_ACTION_ID = "job-hunt"

# Safety valves, not strategy; kept out of the action history
UNTRACKED_ACTION_IDS = frozenset({"coffee-binge", "vacation", "sleep-in"})

# Freelance payout formula
FREELANCE_BASE_PAY = 500
FREELANCE_CODING_WEIGHT = 0.4
FREELANCE_REPUTATION_WEIGHT = 0.6
FREELANCE_VARIANCE = (0.85, 1.15)
FREELANCE_MIN_PAY = 400

# Coffee hits harder when you're running on empty
COFFEE_LOW_ENERGY = 30
COFFEE_LOW_ENERGY_BONUS = 5
