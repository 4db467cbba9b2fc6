from types import SimpleNamespace

from app.matching_engine import match_volunteers, required_skills_for
from app.matching_engine.matcher import proximity_score, score_volunteer


def volunteer(id, skills="", availability="", latitude=None, longitude=None, status="active"):
    return SimpleNamespace(
        id=id,
        skills=skills,
        availability=availability,
        latitude=latitude,
        longitude=longitude,
        status=status,
    )


def request(latitude=None, longitude=None):
    return SimpleNamespace(latitude=latitude, longitude=longitude)


def test_empty_pool():
    assert match_volunteers(request(), [], "Healthcare") == []
    assert match_volunteers(request(), None, None) == []


def test_never_more_than_ten():
    pool = [volunteer(i, skills="First Aid") for i in range(25)]
    assert len(match_volunteers(request(), pool, "Healthcare")) == 10


def test_sorted_non_increasing():
    pool = [
        volunteer(1, skills="Cooking"),
        volunteer(2, skills="First Aid, Medical", availability="Flexible"),
        volunteer(3, skills="First Aid"),
        volunteer(4, availability="flexible hours"),
    ]
    scores = [m.match_score for m in match_volunteers(request(), pool, "Healthcare")]
    assert scores == sorted(scores, reverse=True)
    assert scores == [25, 10, 5, 0]


def test_skill_overlap_adds_ten_per_skill():
    pool = [volunteer(1, skills="First Aid, Cooking"), volunteer(2, skills="Cooking")]
    first, second = match_volunteers(request(), pool, "Healthcare")
    assert first.volunteer.id == 1
    assert first.match_score - second.match_score >= 10


def test_same_coordinates_give_full_proximity():
    req = request(28.6, 77.2)
    assert proximity_score(req, volunteer(1, latitude=28.6, longitude=77.2)) == 10


def test_far_away_gives_zero_proximity():
    req = request(28.6, 77.2)
    assert proximity_score(req, volunteer(1, latitude=29.6, longitude=77.2)) == 0
    assert proximity_score(req, volunteer(2, latitude=40.0, longitude=-3.0)) == 0


def test_missing_coordinates_give_zero_proximity():
    assert proximity_score(request(), volunteer(1, latitude=1.0, longitude=1.0)) == 0
    assert proximity_score(request(1.0, 1.0), volunteer(1, latitude=1.0)) == 0


def test_zero_coordinates_count_as_missing():
    assert proximity_score(request(0.0, 0.0), volunteer(1, latitude=0.0, longitude=0.0)) == 0
    assert proximity_score(request(0.0, 77.2), volunteer(1, latitude=0.0, longitude=77.2)) == 0
    assert proximity_score(request(28.6, 77.2), volunteer(1, latitude=28.6, longitude=0)) == 0


def test_limit_is_capped_at_ten():
    pool = [volunteer(i) for i in range(15)]
    assert len(match_volunteers(request(), pool, limit=50)) == 10
    assert len(match_volunteers(request(), pool, limit=3)) == 3


def test_flexible_bonus():
    flexible = volunteer(1, availability="Flexible schedule")
    weekends = volunteer(2, availability="Weekends only")
    assert score_volunteer(request(), flexible, "") - score_volunteer(request(), weekends, "") == 5


def test_half_points_round_up():
    # 0.25 degrees away -> 7.5 proximity points
    req = request(1.0, 1.0)
    assert score_volunteer(req, volunteer(1, latitude=1.25, longitude=1.0), "") == 8


def test_inactive_and_busy_are_skipped():
    pool = [
        volunteer(1, status="inactive"),
        volunteer(2, status="busy"),
        volunteer(3),
    ]
    assert [m.volunteer.id for m in match_volunteers(request(), pool)] == [3]


def test_ties_keep_pool_order():
    pool = [volunteer(i) for i in range(5)]
    assert [m.volunteer.id for m in match_volunteers(request(), pool)] == [0, 1, 2, 3, 4]


def test_unmapped_category_scores_no_skills():
    pool = [volunteer(1, skills="First Aid, Medical")]
    result = match_volunteers(request(), pool, "Shelter")
    assert result[0].match_score == 0
    assert result[0].matching_skills == ""


def test_matching_skills_reports_required_skills():
    result = match_volunteers(request(), [volunteer(1, skills="Driving")], "Transportation")
    assert result[0].matching_skills == "Transportation, Driving"
    assert result[0].match_score == 10


def test_missing_skill_fields_do_not_raise():
    odd = SimpleNamespace(id=1, status="active")
    result = match_volunteers(request(1.0, 1.0), [odd], "Healthcare")
    assert result[0].match_score == 0


def test_required_skills_table():
    assert required_skills_for("Healthcare") == "First Aid, Medical"
    assert required_skills_for("Emergency Services") == "First Aid, Emergency Response"
    assert required_skills_for("Unknown") == ""
    assert required_skills_for(None) == ""
