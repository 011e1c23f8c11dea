"""End-to-end extraction over realistic comment and post bodies."""

from qalink import (
    IdKind,
    ObjectType,
    ReferenceKind,
    classify_identifier,
    decode_identifier,
    encode_short_id,
    extract_references,
)


def test_markdown_comment():
    """Test a markdown comment mixing links, hash ids and noise."""
    body = (
        "Duplicate of [this one](https://www.example.com/questions/10010000000000060/how-to-parse#top).\n"
        "See also #10020000000000061, issue #42 and the css color #FFF.\n"
        "`questions/` without an id is ignored, as is questions/hello.\n"
    )
    refs = extract_references(body)

    assert [(r.kind, r.question_id, r.answer_id) for r in refs] == [
        (ReferenceKind.FROM_PATH, "10010000000000060", ""),
        (ReferenceKind.FROM_HASH, "", "10020000000000061"),
    ]


def test_short_ids_from_encoder_are_found():
    """Test short ids produced by the encoder round-trip through text scanning."""
    question = encode_short_id(ObjectType.QUESTION, 12345)
    answer = encode_short_id(ObjectType.ANSWER, 67890)
    body = f"moved to https://example.com/questions/{question}/{answer}/slug?from=share"

    (ref,) = extract_references(body)
    assert ref.question_id == question
    assert ref.answer_id == answer
    assert ref.canonical_question_id == "10010000000012345"
    assert ref.canonical_answer_id == "10020000000067890"


def test_structured_field_validation():
    """Test validating an isolated id without scanning."""
    assert classify_identifier("10010000000000060") is IdKind.QUESTION
    assert decode_identifier("10110000000000060") is None


def test_results_serialise():
    refs = extract_references("#10010000000000060")
    assert [r.to_dict() for r in refs] == [
        {"kind": "id", "question_id": "10010000000000060", "answer_id": "", "offset": 0}
    ]
