from therapytips_ssg.pipeline.site_builder.personality_tests_data import (
    PERSONALITY_TESTS,
    find_test,
    to_questions_json,
)


def test_bundled_tests_are_complete():
    assert len(PERSONALITY_TESTS) == 10
    slugs = [test["slug"] for test in PERSONALITY_TESTS]
    assert len(set(slugs)) == len(slugs)
    for test in PERSONALITY_TESTS:
        assert test["article_type"] == "personality-tests"
        assert test["questions"], test["slug"]
        orders = [q["order"] for q in test["questions"]]
        assert orders == sorted(orders)


def test_to_questions_json_is_keyed_by_order():
    test = find_test("active-empathic-listening-scale")
    questions = to_questions_json(test)
    assert list(questions)[0] == "1"
    assert questions["1"] == "I am sensitive to what others are not saying."
    assert len(questions) == len(test["questions"])


def test_find_test_unknown_slug():
    assert find_test("no-such-test") is None
