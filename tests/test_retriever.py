import pytest

from sitebot.core.knowledge_store import KnowledgeStore
from sitebot.core.retriever import Retriever, ScoredChunk, query_terms, score_chunk
from sitebot.ingestion.base import Document


def make_doc(url, *chunks):
    return Document(url=url, text="".join(chunks), chunks=tuple(chunks))


@pytest.fixture()
def store():
    s = KnowledgeStore()
    s.replace([
        make_doc("https://x.com/", "We produce corporate video. Video is our passion.", "Contact us today."),
        make_doc("https://x.com/drones", "Drone video, drone photos and more drone work."),
        make_doc("https://x.com/about", "Founded in 1999 in Ohio."),
    ])
    return s


def test_query_terms_drop_short_terms():
    assert query_terms("Do we do drone VIDEO, ok?") == ["drone", "video"]


def test_score_chunk_counts_whole_words_case_insensitively():
    three = "Drone shots. DRONE rentals. drone pilots."
    one = "A drone. Drones and droned do not count."

    assert score_chunk("drone", three) == 3
    assert score_chunk("drone", one) == 1
    assert score_chunk("drone", three) > score_chunk("drone", one)


def test_score_chunk_escapes_regex_characters():
    assert score_chunk("c++ (beta)", "beta release of c") == 1


def test_search_ranks_and_filters(store):
    results = Retriever(store).search("drone video")

    assert [r.url for r in results] == ["https://x.com/drones", "https://x.com/"]
    assert results[0].score == 4
    assert results[1].score == 2
    assert all(r.score > 0 for r in results)


def test_search_respects_k_and_stable_ties(store):
    s = KnowledgeStore()
    s.replace([make_doc("https://x.com/a", "video one"), make_doc("https://x.com/b", "video two")])

    results = Retriever(s).search("video", k=1)

    assert results == [ScoredChunk(url="https://x.com/a", text="video one", score=1)]


def test_search_without_matches_gives_empty_context(store):
    retriever = Retriever(store)

    assert retriever.search("zz qq") == []
    assert retriever.retrieve_context("unrelated banana") == ""


def test_build_context_attributes_sources(store):
    context = Retriever(store).retrieve_context("drone")

    assert context.startswith("[Source] https://x.com/drones\n")
    assert "Drone video, drone photos" in context


@pytest.mark.parametrize("budget", [0, 10, 40, 75, 120, 6000])
def test_build_context_never_exceeds_budget(budget):
    results = [
        ScoredChunk(url="https://x.com/p%d" % i, text="video " * 20, score=10 - i)
        for i in range(5)
    ]
    retriever = Retriever(KnowledgeStore(), max_context_chars=budget)

    context = retriever.build_context(results)

    assert len(context) <= budget


def test_build_context_truncates_last_chunk_and_stops():
    results = [
        ScoredChunk(url="u1", text="a" * 10, score=3),
        ScoredChunk(url="u2", text="b" * 50, score=2),
        ScoredChunk(url="u3", text="c" * 10, score=1),
    ]
    # "[Source] u1\n" is 12 chars, the block separator 2
    retriever = Retriever(KnowledgeStore(), max_context_chars=12 + 10 + 2 + 12 + 5)

    context = retriever.build_context(results)

    assert context == "[Source] u1\n" + "a" * 10 + "\n\n[Source] u2\n" + "b" * 5
    assert "u3" not in context
