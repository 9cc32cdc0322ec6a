import pytest

from vocab_reader.io import ArticleRepository, DatabaseManager


@pytest.fixture
def repository(tmp_path):
    db = DatabaseManager(tmp_path / "articles.db")
    db.ensure_schema()
    yield ArticleRepository(db.connection)
    db.close()


def test_add_and_get_article(repository):
    article = repository.add_article("  Pets ", "Cats run fast.\r\nDogs bark loud.")

    fetched = repository.get_article_by_id(article.id)
    assert fetched == article
    assert fetched.title == "Pets"
    assert fetched.content == "Cats run fast.\nDogs bark loud."


def test_missing_article_returns_none(repository):
    assert repository.get_article_by_id(999) is None


@pytest.mark.parametrize("title, content", [("", "text"), ("Title", "  \n ")])
def test_add_article_rejects_empty_input(repository, title, content):
    with pytest.raises(RuntimeError):
        repository.add_article(title, content)


def test_list_articles_newest_first(repository):
    first = repository.add_article("First", "One.")
    second = repository.add_article("Second", "Two.")

    assert [a.id for a in repository.list_articles()] == [second.id, first.id]


def test_search_is_case_insensitive(repository):
    repository.add_article("The Ocean Story", "Waves.")
    repository.add_article("Mountains", "Rocks.")

    titles = [a.title for a in repository.search_articles("ocean")]
    assert titles == ["The Ocean Story"]


def test_search_treats_wildcards_literally(repository):
    repository.add_article("100% Fun", "Yes.")
    repository.add_article("1000 Facts", "No.")

    assert [a.title for a in repository.search_articles("0%")] == ["100% Fun"]
    assert repository.search_articles("_") == []


def test_blank_search_lists_everything(repository):
    repository.add_article("A", "a.")
    repository.add_article("B", "b.")

    assert len(repository.search_articles("   ")) == 2


def test_save_rewritten_article_creates_new_record(repository):
    original = repository.add_article("Pets", "Cats run fast.")
    saved = repository.save_rewritten_article("Pets (rewritten)", "Cats [run] fast.")

    assert saved.id != original.id
    assert repository.get_article_by_id(original.id).content == "Cats run fast."


def test_repository_requires_connection():
    with pytest.raises(RuntimeError, match="Database connection required"):
        ArticleRepository(None)
