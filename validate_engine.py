"""
Validation script: checks game data integrity and plays a short seeded game
to catch runtime errors before a host starts serving players.
"""
import asyncio
import sys

from lifeatdev.utils.logs import setup_logging


async def validate_engine():
    """Run every check; returns the list of failures."""
    print("=" * 60)
    print("Starting Engine Validation")
    print("=" * 60)

    errors = []

    # 1: imports
    print("\n1. Testing imports...")
    try:
        from lifeatdev.services import catalog_service, interview_service, score_service
        from lifeatdev.services.base_service import make_rng
        from lifeatdev.services.game_service import GameService
        print("   ✅ All core imports successful")
    except Exception as e:
        errors.append(f"Import error: {e}")
        print(f"   ❌ Import failed: {e}")
        return errors

    # 2: catalog
    print("\n2. Testing job catalog...")
    try:
        catalog_service.validate_catalog()
        jobs = catalog_service.get_all_jobs()
        print(f"   ✅ Catalog valid ({len(jobs)} jobs, {len(catalog_service.get_victory_jobs())} terminal)")
        print(f"   ✅ Starting job: {catalog_service.get_starting_job().title}")
    except Exception as e:
        errors.append(f"Catalog error: {e}")
        print(f"   ❌ Catalog check failed: {e}")

    # 3: template bank
    print("\n3. Testing interview templates...")
    try:
        interview_service.validate_template_bank()
        rng = make_rng(0)
        for path in {job.path for job in catalog_service.get_all_jobs()}:
            for level in range(1, 5):
                question = interview_service.generate_offline_interview(path, level, rng)
                assert len(question.options) == 4, f"{path}/{level} has {len(question.options)} options"
                assert "{{" not in question.question, f"Unfilled placeholder for {path}/{level}"
        print("   ✅ Every path and level produces a well-formed question")
    except Exception as e:
        errors.append(f"Template error: {e}")
        print(f"   ❌ Template check failed: {e}")

    # 4: scoring
    print("\n4. Testing score calculator...")
    try:
        from lifeatdev.models import GameOverReason, PlayerStats

        stats = PlayerStats(
            weeks=0, stress=10, energy=50, money=100000, coding=900, reputation=850,
            current_job=catalog_service.get_job("cto"), age=26,
        )
        score = score_service.calculate_score(stats, GameOverReason.VICTORY)
        assert score.total_score == 8020, f"Expected 8020, got {score.total_score}"
        print(f"   ✅ {score_service.get_score_breakdown_text(score)}")
    except Exception as e:
        errors.append(f"Score error: {e}")
        print(f"   ❌ Score check failed: {e}")

    # 5: a short game
    print("\n5. Playing a seeded year...")
    try:
        game = GameService(make_rng(42), event_delay=0, action_event_delay=0)
        game.start_game("self-taught")
        while game.state.phase.value == "playing" and game.stats.years_worked < 1:
            if game.state.has_pending_decision:
                game.decline_offers()
                game.cancel_interview()
            action = "sleep-in" if game.stats.energy < 40 or game.stats.stress > 60 else "grind-leetcode"
            await game.take_turn(action)
        print(f"   ✅ Year played: age {game.stats.age}, {game.stats.weeks} weeks, job {game.stats.current_job.id}")
        print(f"   ✅ Save round trip: {len(game.save()['event_log'])} log entries")
    except Exception as e:
        errors.append(f"Game loop error: {e}")
        print(f"   ❌ Game loop failed: {e}")

    print("\n" + "=" * 60)
    if errors:
        print(f"❌ Validation finished with {len(errors)} error(s):")
        for error in errors:
            print(f"   - {error}")
    else:
        print("✅ All validation checks passed!")
    print("=" * 60)
    return errors


if __name__ == "__main__":
    setup_logging(to_file=False)
    failures = asyncio.run(validate_engine())
    sys.exit(1 if failures else 0)
