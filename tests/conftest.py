from pathlib import Path

import pytest

from quizeval.session import Session

QUESTIONS = """id,text,options,correctOption,marks,penalty
Q1,What is 2+2?,A|B|C|D,A,2,1
Q2,Capital of France?,A|B|C|D,C,3,0.5
Q3,Largest planet?,A|B|C|D,B,1,0
"""

ANSWERS = """id,correctOption
Q1,A
Q2,C
Q3,B
"""

RESPONSES = """studentId,questionId,chosenOption
s1,Q1,A
s1,Q2,c
s1,Q3,D
s2,Q1,B
s2,Q2,
s3,Q3,b
"""


@pytest.fixture
def write_csv(tmp_path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_files(write_csv):
    return {
        "questions": write_csv("questions.csv", QUESTIONS),
        "answers": write_csv("answers.csv", ANSWERS),
        "responses": write_csv("responses.csv", RESPONSES),
    }


@pytest.fixture
def loaded_session(data_files):
    session = Session()
    session.load_questions(data_files["questions"])
    session.load_answers(data_files["answers"])
    session.load_responses(data_files["responses"])
    return session
