from utils.scoring import EVENT_TYPES, evaluate_event, evaluate_suitability


def _profile(key):
    return next(p for p in EVENT_TYPES if p.key == key)


def test_sports_cold_and_windy(make_obs):
    result = evaluate_event(make_obs(temperature=10, wind_speed=20, precipitation=0), _profile("sports"))
    assert not result.suitable
    assert list(result.reasons) == ["Too cold (10°C < 15°C)", "Too windy (20.0 m/s > 10 m/s)"]


def test_good_day_suits_everything(make_obs):
    results = evaluate_suitability(make_obs(temperature=20, wind_speed=5, precipitation=0))
    assert list(results) == ["picnic", "sports", "festival", "wedding"]
    assert all(r.suitable and r.reasons == () for r in results.values())


def test_hot_and_rain_reasons(make_obs):
    wedding = evaluate_event(make_obs(temperature=31.5, precipitation=2.5), _profile("wedding"))
    assert list(wedding.reasons) == ["Too hot (31.5°C > 28°C)", "Too much rain (2.5mm > 0mm)"]
    picnic = evaluate_event(make_obs(precipitation=2.5), _profile("picnic"))
    assert list(picnic.reasons) == ["Too much rain (2.5mm > 1mm)"]


def test_limits_are_inclusive(make_obs):
    festival = evaluate_event(make_obs(temperature=30, wind_speed=20, precipitation=5), _profile("festival"))
    assert festival.suitable


def test_custom_profiles(make_obs):
    results = evaluate_suitability(make_obs(), profiles=EVENT_TYPES[:1])
    assert list(results) == ["picnic"]


def test_evaluation_is_repeatable(make_obs):
    obs = make_obs(temperature=33, wind_speed=12, precipitation=3)
    assert evaluate_suitability(obs) == evaluate_suitability(obs)
