# data/jobs.py
"""
Career graph: 22 jobs across 6 paths.

Order matters. Promotion scans walk this table top to bottom, so jobs are
listed path by path, lowest tier first.

Paths:
- Corporate (6 jobs): Levels 1-3, students and the classic ladder
- Management (3 jobs): Level 4
- IC (3 jobs): Level 4
- Hustler (4 jobs): Levels 1-2, the no-degree start
- Business (3 jobs): Level 3
- Specialist (3 jobs): Level 3

Bridge nodes (`bridges_to`) are the only places a player can leave their path:
Senior Developer forks into Management/IC, and both level-2 hustler jobs fork
into Business/Specialist.
"""
from __future__ import annotations

JOBS: dict[str, dict] = {
    # ==================== CORPORATE - Level 1 (Entry) ====================
    "cs-student": {
        "title": "CS Student",
        "path": "corporate",
        "level": 1,
        "requirements": {"coding": 0, "reputation": 0},
        "yearly_pay": -10000,  # Tuition
        "rent_per_year": 4000,  # Dorm or shared apartment
        "student": True,
    },
    "cs-student-easy": {
        "title": "CS Student (Family Supported)",
        "path": "corporate",
        "level": 1,
        "requirements": {"coding": 0, "reputation": 0},
        "yearly_pay": 0,  # Family pays tuition
        "rent_per_year": 0,  # Family pays rent
        "student": True,
    },
    "intern": {
        "title": "Intern",
        "path": "corporate",
        "level": 1,
        "requirements": {"coding": 100, "reputation": 0},
        "yearly_pay": 20000,
        "rent_per_year": 9000,
    },

    # ==================== CORPORATE - Level 2 (Professional) ====================
    "junior-dev": {
        "title": "Junior Developer",
        "path": "corporate",
        "level": 2,
        "requirements": {"coding": 250, "reputation": 50},
        "yearly_pay": 60000,
        "rent_per_year": 15000,
    },
    "mid-dev": {
        "title": "Mid-Level Developer",
        "path": "corporate",
        "level": 2,
        "requirements": {"coding": 450, "reputation": 150},
        "yearly_pay": 95000,
        "rent_per_year": 20000,
        "intermediate": True,
    },

    # ==================== CORPORATE - Level 3 (Senior) ====================
    "senior-dev": {
        "title": "Senior Developer",
        "path": "corporate",
        "level": 3,
        "requirements": {"coding": 650, "reputation": 280},
        "yearly_pay": 140000,
        "rent_per_year": 30000,
        "bridges_to": ("management", "ic"),
    },

    # ==================== MANAGEMENT - Level 4 ====================
    "team-lead": {
        "title": "Team Lead",
        "path": "management",
        "level": 4,
        "requirements": {"coding": 550, "reputation": 450},
        "yearly_pay": 160000,
        "rent_per_year": 35000,
        "intermediate": True,
    },
    "engineering-manager": {
        "title": "Engineering Manager",
        "path": "management",
        "level": 4,
        "requirements": {"coding": 580, "reputation": 650},
        "yearly_pay": 190000,
        "rent_per_year": 42000,
    },
    "cto": {
        "title": "CTO",
        "path": "management",
        "level": 4,
        "requirements": {"coding": 750, "reputation": 900},
        "yearly_pay": 300000,
        "rent_per_year": 60000,
        "game_end": True,
    },

    # ==================== IC - Level 4 ====================
    "staff-engineer": {
        "title": "Staff Engineer",
        "path": "ic",
        "level": 4,
        "requirements": {"coding": 800, "reputation": 450},
        "yearly_pay": 200000,
        "rent_per_year": 40000,
    },
    "principal-engineer": {
        "title": "Principal Engineer",
        "path": "ic",
        "level": 4,
        "requirements": {"coding": 900, "reputation": 650},
        "yearly_pay": 250000,
        "rent_per_year": 50000,
        "intermediate": True,
    },
    "distinguished-fellow": {
        "title": "Distinguished Fellow",
        "path": "ic",
        "level": 4,
        "requirements": {"coding": 950, "reputation": 850},
        "yearly_pay": 400000,
        "rent_per_year": 75000,
        "game_end": True,
    },

    # ==================== HUSTLER - Level 1 (Beginning) ====================
    "unemployed": {
        "title": "Unemployed",
        "path": "hustler",
        "level": 1,
        "requirements": {"coding": 0, "reputation": 0},
        "yearly_pay": 0,
        "rent_per_year": 6000,  # Mom's basement or roommates
    },
    "script-kiddie": {
        "title": "Script Kiddie",
        "path": "hustler",
        "level": 1,
        "requirements": {"coding": 50, "reputation": 0},
        "yearly_pay": 5000,
        "rent_per_year": 7200,
        "intermediate": True,
    },

    # ==================== HUSTLER - Level 2 (Freelance) ====================
    "freelancer": {
        "title": "Freelancer",
        "path": "hustler",
        "level": 2,
        "requirements": {"coding": 200, "reputation": 0, "money": 1500},  # Need a laptop
        "yearly_pay": 65000,
        "rent_per_year": 18000,
        "bridges_to": ("business", "specialist"),
    },
    "digital-nomad": {
        "title": "Digital Nomad",
        "path": "hustler",
        "level": 2,
        "requirements": {"coding": 400, "reputation": 200, "money": 5000},
        "yearly_pay": 75000,
        "rent_per_year": 24000,  # Airbnbs and travel
        "intermediate": True,
        "bridges_to": ("business", "specialist"),
    },

    # ==================== BUSINESS - Level 3 ====================
    "agency-owner": {
        "title": "Agency Owner",
        "path": "business",
        "level": 3,
        "requirements": {"coding": 300, "reputation": 550, "money": 20000},
        "yearly_pay": 120000,
        "rent_per_year": 28000,
    },
    "tech-influencer": {
        "title": "Tech Influencer",
        "path": "business",
        "level": 3,
        "requirements": {"coding": 300, "reputation": 750},
        "yearly_pay": 150000,
        "rent_per_year": 36000,
        "intermediate": True,
    },
    "tech-mogul": {
        "title": "Tech Mogul",
        "path": "business",
        "level": 3,
        "requirements": {"coding": 480, "reputation": 900, "money": 500000},
        "yearly_pay": 1000000,
        "rent_per_year": 120000,  # Penthouse
        "game_end": True,
    },

    # ==================== SPECIALIST - Level 3 ====================
    "contractor": {
        "title": "Contractor",
        "path": "specialist",
        "level": 3,
        "requirements": {"coding": 650, "reputation": 280},
        "yearly_pay": 180000,  # $150/hr equivalent
        "rent_per_year": 32000,
        "intermediate": True,
    },
    "consultant": {
        "title": "Consultant",
        "path": "specialist",
        "level": 3,
        "requirements": {"coding": 800, "reputation": 550},
        "yearly_pay": 360000,  # $300/hr equivalent
        "rent_per_year": 48000,
    },
    "industry-architect": {
        "title": "Industry Architect",
        "path": "specialist",
        "level": 3,
        "requirements": {"coding": 950, "reputation": 850},
        "yearly_pay": 2000000,  # $10k/day equivalent
        "rent_per_year": 150000,
        "game_end": True,
    },
}

# The "no job" entry every self-taught run starts from
STARTING_JOB_ID = "unemployed"

# Entry internship; does not count as graduating into a real job
INTERNSHIP_JOB_ID = "intern"

# Informal entry roles reachable without any assessment
NO_INTERVIEW_JOB_IDS = frozenset({"unemployed", "script-kiddie"})

# Where a student may land after school
GRADUATION_PATHS = ("corporate", "hustler")

# ==================== STARTING PATHS ====================
# The family-funded student variant; rent covered while support lasts
FAMILY_FUNDED_STUDENT_JOB_ID = "cs-student-easy"

STARTING_PATHS: dict[str, dict] = {
    "self-taught": {
        "job_id": STARTING_JOB_ID,
        "money": 1000,
        "coding": 50,
        "reputation": 0,
        "family_support_years": 0,
        "intro": "No degree. No safety net. Just you and the grind.",
        "log_type": "warning",
    },
    "student": {
        "job_id": "cs-student",
        "money": 0,
        "coding": 100,
        "reputation": 20,
        "family_support_years": 0,
        "intro": "You enrolled in a CS program. Time is tight, but foundations are strong.",
        "log_type": "info",
    },
    "student-easy": {
        "job_id": FAMILY_FUNDED_STUDENT_JOB_ID,
        "money": 500,
        "coding": 100,
        "reputation": 20,
        "family_support_years": 4,
        "intro": "You enrolled in a CS program with family support. Rent covered for 4 years!",
        "log_type": "success",
    },
}

DEFAULT_STARTING_PATH = "self-taught"
