"""
Life at Dev - career progression and scoring engine.

Jobs, promotions, year-end settlement, offline interviews and final scoring
for a week-by-week developer career simulation. Rendering and storage are
left to the host; everything here is plain data in, plain data out.
"""

__version__ = "0.1.0"
