import pytest

from quizeval.errors import LoadError
from quizeval.loaders import load_answers, load_questions, load_responses
from quizeval.session import Session


def test_load_questions_keeps_file_order(data_files):
    catalog = load_questions(data_files["questions"])
    assert list(catalog) == ["Q1", "Q2", "Q3"]
    q2 = catalog["Q2"]
    assert q2.text == "Capital of France?"
    assert q2.options == ("A", "B", "C", "D")
    assert q2.correct_option == "C"
    assert q2.marks == 3.0
    assert q2.penalty == 0.5


def test_load_questions_accepts_quoted_text_with_commas(write_csv):
    path = write_csv("q.csv", 'id,text,options,correct,marks,penalty\nQ1,"Pick one, please",x|y,y,1,0\n')
    catalog = load_questions(path)
    assert catalog["Q1"].text == "Pick one, please"
    assert catalog["Q1"].options == ("x", "y")


@pytest.mark.parametrize(
    "row,message",
    [
        ("Q1,Text,A|B,A,two,1", "not a number"),
        ("Q1,Text,A|B,A,2,-1", "non-negative"),
        ("Q1,Text,A|B,A,2", "expected 6 fields"),
        (",Text,A|B,A,2,1", "blank"),
        ("Q1,Text,A|B,,2,1", "no correct option"),
    ],
)
def test_load_questions_rejects_bad_rows(write_csv, row, message):
    path = write_csv("q.csv", "id,text,options,correct,marks,penalty\n" + row + "\n")
    with pytest.raises(LoadError, match=message):
        load_questions(path)


def test_load_questions_rejects_duplicate_ids(write_csv):
    path = write_csv("q.csv", "h\nQ1,a,A|B,A,1,0\nQ1,b,A|B,B,1,0\n")
    with pytest.raises(LoadError, match="duplicate question 'Q1'"):
        load_questions(path)


def test_load_error_names_file_and_line(write_csv):
    path = write_csv("q.csv", "h\nQ1,a,A|B,A,1,0\nQ2,b,A|B,B,x,0\n")
    with pytest.raises(LoadError) as excinfo:
        load_questions(path)
    assert str(path) in str(excinfo.value)
    assert "line 3" in str(excinfo.value)


def test_missing_file_is_a_load_error(tmp_path):
    with pytest.raises(LoadError, match="File not found"):
        load_answers(tmp_path / "absent.csv")


def test_empty_file_is_a_load_error(write_csv):
    with pytest.raises(LoadError, match="header"):
        load_answers(write_csv("a.csv", ""))


def test_header_only_file_loads_empty(write_csv):
    assert load_answers(write_csv("a.csv", "id,correctOption\n")) == {}


def test_load_answers(data_files):
    assert load_answers(data_files["answers"]) == {"Q1": "A", "Q2": "C", "Q3": "B"}


def test_load_answers_requires_both_fields(write_csv):
    with pytest.raises(LoadError):
        load_answers(write_csv("a.csv", "id,correct\nQ1,\n"))


def test_load_responses_nests_by_student(data_files):
    responses = load_responses(data_files["responses"])
    assert list(responses) == ["s1", "s2", "s3"]
    assert responses["s1"] == {"Q1": "A", "Q2": "c", "Q3": "D"}
    assert responses["s2"] == {"Q1": "B", "Q2": ""}
    assert responses["s3"] == {"Q3": "b"}


def test_load_responses_last_write_wins(write_csv):
    path = write_csv("r.csv", "h\ns1,Q1,A\ns2,Q1,B\ns1,Q1,C\n")
    responses = load_responses(path)
    assert list(responses) == ["s1", "s2"]
    assert responses["s1"] == {"Q1": "C"}


def test_load_responses_allows_missing_choice_and_blank_lines(write_csv):
    path = write_csv("r.csv", "h\ns1,Q1\n\ns1,Q2,B\n")
    assert load_responses(path) == {"s1": {"Q1": "", "Q2": "B"}}


def test_load_responses_requires_ids(write_csv):
    with pytest.raises(LoadError, match="required"):
        load_responses(write_csv("r.csv", "h\n,Q1,A\n"))


def test_failed_question_load_keeps_previous_catalog(data_files, write_csv):
    session = Session()
    session.load_questions(data_files["questions"])
    before = dict(session.questions)

    bad = write_csv("bad.csv", "h\nQ9,Text,A|B,A,1,0\nQ10,Text,A|B,A,lots,0\n")
    with pytest.raises(LoadError):
        session.load_questions(bad)
    assert session.questions == before


def test_reloading_responses_replaces_matrix(data_files, write_csv):
    session = Session()
    session.load_responses(data_files["responses"])
    session.load_responses(write_csv("new.csv", "h\ns9,Q1,A\n"))
    assert session.responses == {"s9": {"Q1": "A"}}


def test_failed_load_leaves_other_tables_alone(loaded_session, tmp_path):
    answers = dict(loaded_session.answers)
    responses = dict(loaded_session.responses)
    with pytest.raises(LoadError):
        loaded_session.load_questions(tmp_path / "missing.csv")
    assert loaded_session.answers == answers
    assert loaded_session.responses == responses
    assert list(loaded_session.questions) == ["Q1", "Q2", "Q3"]


def test_key_mismatch_is_logged(write_csv, caplog):
    session = Session()
    session.load_questions(write_csv("q.csv", "h\nQ1,a,A|B,A,1,0\nQ2,b,A|B,B,1,0\n"))
    with caplog.at_level("WARNING", logger="quizeval.session"):
        session.load_answers(write_csv("a.csv", "h\nQ1,B\n"))
    assert "answer key says 'B'" in caplog.text
    assert "Q2 has no answer-key entry" in caplog.text
