"""
Content repository contract tests.

Covers contacts, projects, tech stack entries and blog posts: creation,
filtered and ordered listings, partial updates and deletes.
"""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from api.schemas.content import (
    InsertContact,
    InsertProject,
    UpdateProject,
    InsertTechStack,
    UpdateTechStack,
    InsertBlogPost,
    UpdateBlogPost,
)
from db.models import Contact
from repositories.base import NotFoundError
from repositories.blog_post_repo import BlogPostRepository
from repositories.contact_repo import ContactRepository
from repositories.project_repo import ProjectRepository
from repositories.tech_stack_repo import TechStackRepository


# ============================================================
# Contacts
# ============================================================


class TestContacts:

    async def test_create_contact(self, contact_repo: ContactRepository):
        contact = await contact_repo.create_contact(
            InsertContact(name="Ada", email="ada@example.com", subject="Hi", message="Hello there")
        )
        assert contact.id is not None
        assert contact.name == "Ada"
        assert contact.email == "ada@example.com"
        assert contact.subject == "Hi"
        assert contact.message == "Hello there"
        assert contact.created_at is not None

    async def test_list_contacts_oldest_first(self, contact_repo: ContactRepository):
        now = datetime.now()
        await contact_repo.add(
            Contact(name="new", email="n@example.com", message="m", created_at=now)
        )
        await contact_repo.add(
            Contact(name="old", email="o@example.com", message="m", created_at=now - timedelta(days=2))
        )
        await contact_repo.add(
            Contact(name="mid", email="m@example.com", message="m", created_at=now - timedelta(days=1))
        )

        contacts = await contact_repo.list_contacts()
        assert [c.name for c in contacts] == ["old", "mid", "new"]

    async def test_list_contacts_empty(self, contact_repo: ContactRepository):
        assert await contact_repo.list_contacts() == []


# ============================================================
# Projects
# ============================================================


def _project(title: str, sort_order: int = 0, is_active: int = 1) -> InsertProject:
    return InsertProject(
        title=title,
        description=f"{title} description",
        technologies=["python", "sqlalchemy"],
        sort_order=sort_order,
        is_active=is_active,
    )


class TestProjects:

    async def test_create_project_defaults(self, project_repo: ProjectRepository):
        project = await project_repo.create_project(
            InsertProject(title="Site", description="My site")
        )
        assert project.id is not None
        assert project.is_active == 1
        assert project.sort_order == 0
        assert project.technologies == []

    async def test_create_project_matches_input(self, project_repo: ProjectRepository):
        project = await project_repo.create_project(_project("Engine", sort_order=3))
        fetched = await project_repo.get_by_id(project.id)
        assert fetched.title == "Engine"
        assert fetched.description == "Engine description"
        assert fetched.technologies == ["python", "sqlalchemy"]
        assert fetched.sort_order == 3

    async def test_list_active_only_sorted(self, project_repo: ProjectRepository):
        await project_repo.create_project(_project("third", sort_order=30))
        await project_repo.create_project(_project("hidden", sort_order=5, is_active=0))
        await project_repo.create_project(_project("first", sort_order=10))
        await project_repo.create_project(_project("second", sort_order=20))

        projects = await project_repo.list_projects()
        assert [p.title for p in projects] == ["first", "second", "third"]

    async def test_list_including_inactive(self, project_repo: ProjectRepository):
        await project_repo.create_project(_project("shown", sort_order=2))
        await project_repo.create_project(_project("hidden", sort_order=1, is_active=0))

        projects = await project_repo.list_projects(include_inactive=True)
        assert [p.title for p in projects] == ["hidden", "shown"]

    async def test_update_only_present_fields(self, project_repo: ProjectRepository):
        project = await project_repo.create_project(
            InsertProject(title="Old", description="keep me", live_url="https://old.example.com")
        )

        updated = await project_repo.update_project(project.id, UpdateProject(title="New"))
        assert updated.title == "New"
        assert updated.description == "keep me"
        assert updated.live_url == "https://old.example.com"

    async def test_update_explicit_none_clears_field(self, project_repo: ProjectRepository):
        project = await project_repo.create_project(
            InsertProject(title="P", description="d", live_url="https://p.example.com")
        )

        updated = await project_repo.update_project(project.id, UpdateProject(live_url=None))
        assert updated.live_url is None

    async def test_soft_delete_via_is_active(self, project_repo: ProjectRepository):
        project = await project_repo.create_project(_project("fading"))

        await project_repo.update_project(project.id, UpdateProject(is_active=0))

        assert await project_repo.list_projects() == []
        assert await project_repo.get_by_id(project.id) is not None

    async def test_update_missing_raises(self, project_repo: ProjectRepository):
        with pytest.raises(NotFoundError):
            await project_repo.update_project(404, UpdateProject(title="x"))

    async def test_delete_project(self, project_repo: ProjectRepository):
        project = await project_repo.create_project(_project("doomed"))

        assert await project_repo.delete_by_id(project.id) is True
        assert await project_repo.get_by_id(project.id) is None


# ============================================================
# Tech stack
# ============================================================


class TestTechStack:

    async def test_create_entry(self, tech_stack_repo: TechStackRepository):
        tech = await tech_stack_repo.create_tech_stack(
            InsertTechStack(name="Python", category="backend", proficiency=90)
        )
        assert tech.id is not None
        assert tech.name == "Python"
        assert tech.category == "backend"
        assert tech.proficiency == 90
        assert tech.is_active == 1

    async def test_list_active_only_sorted(self, tech_stack_repo: TechStackRepository):
        await tech_stack_repo.create_tech_stack(InsertTechStack(name="Go", category="backend", sort_order=2))
        await tech_stack_repo.create_tech_stack(InsertTechStack(name="Perl", category="backend", sort_order=0, is_active=0))
        await tech_stack_repo.create_tech_stack(InsertTechStack(name="Rust", category="backend", sort_order=1))

        entries = await tech_stack_repo.list_tech_stack()
        assert [t.name for t in entries] == ["Rust", "Go"]

        everything = await tech_stack_repo.list_tech_stack(include_inactive=True)
        assert [t.name for t in everything] == ["Perl", "Rust", "Go"]

    async def test_update_entry(self, tech_stack_repo: TechStackRepository):
        tech = await tech_stack_repo.create_tech_stack(InsertTechStack(name="JS", category="frontend"))

        updated = await tech_stack_repo.update_tech_stack(
            tech.id, UpdateTechStack(name="TypeScript", sort_order=7)
        )
        assert updated.name == "TypeScript"
        assert updated.category == "frontend"
        assert updated.sort_order == 7

    async def test_update_missing_raises(self, tech_stack_repo: TechStackRepository):
        with pytest.raises(NotFoundError):
            await tech_stack_repo.update_tech_stack(12345, UpdateTechStack(name="x"))

    async def test_delete_entry(self, tech_stack_repo: TechStackRepository):
        tech = await tech_stack_repo.create_tech_stack(InsertTechStack(name="COBOL", category="legacy"))

        await tech_stack_repo.delete_by_id(tech.id)
        assert await tech_stack_repo.get_by_id(tech.id) is None


# ============================================================
# Blog posts
# ============================================================


def _post(slug: str, is_published: int = 1, published_at: datetime = None) -> InsertBlogPost:
    return InsertBlogPost(
        title=slug.replace("-", " ").title(),
        slug=slug,
        content=f"Body of {slug}",
        tags=["notes"],
        is_published=is_published,
        published_at=published_at,
    )


class TestBlogPosts:

    async def test_create_post(self, blog_post_repo: BlogPostRepository):
        post = await blog_post_repo.create_post(_post("hello-world"))
        assert post.id is not None
        assert post.slug == "hello-world"
        assert post.title == "Hello World"
        assert post.tags == ["notes"]
        assert post.created_at is not None
        assert post.updated_at is not None

    async def test_get_by_slug(self, blog_post_repo: BlogPostRepository):
        post = await blog_post_repo.create_post(_post("by-slug"))

        fetched = await blog_post_repo.get_by_slug("by-slug")
        assert fetched is not None
        assert fetched.id == post.id
        assert await blog_post_repo.get_by_slug("missing") is None

    async def test_unique_slug_constraint(self, blog_post_repo: BlogPostRepository, db_session):
        await blog_post_repo.create_post(_post("twice"))

        with pytest.raises(IntegrityError):
            await blog_post_repo.create_post(_post("twice"))
        await db_session.rollback()

    async def test_list_published_newest_first(self, blog_post_repo: BlogPostRepository):
        now = datetime.now()
        await blog_post_repo.create_post(_post("older", published_at=now - timedelta(days=3)))
        await blog_post_repo.create_post(_post("draft", is_published=0))
        await blog_post_repo.create_post(_post("newest", published_at=now))
        await blog_post_repo.create_post(_post("middle", published_at=now - timedelta(days=1)))

        posts = await blog_post_repo.list_posts()
        assert [p.slug for p in posts] == ["newest", "middle", "older"]

    async def test_list_including_unpublished(self, blog_post_repo: BlogPostRepository):
        await blog_post_repo.create_post(_post("live", published_at=datetime.now()))
        await blog_post_repo.create_post(_post("draft", is_published=0))

        posts = await blog_post_repo.list_posts(include_unpublished=True)
        assert [p.slug for p in posts] == ["live", "draft"]

    async def test_update_refreshes_updated_at(self, blog_post_repo: BlogPostRepository):
        post = await blog_post_repo.create_post(_post("edit-me"))
        previous = post.updated_at

        updated = await blog_post_repo.update_post(post.id, UpdateBlogPost(title="Edited"))
        assert updated.title == "Edited"
        assert updated.content == "Body of edit-me"
        assert updated.updated_at >= previous

    async def test_update_with_empty_patch_still_touches(self, blog_post_repo: BlogPostRepository):
        post = await blog_post_repo.create_post(_post("touch"))
        previous = post.updated_at

        updated = await blog_post_repo.update_post(post.id, UpdateBlogPost())
        assert updated.updated_at >= previous
        assert updated.slug == "touch"

    async def test_publish_draft(self, blog_post_repo: BlogPostRepository):
        post = await blog_post_repo.create_post(_post("soon", is_published=0))
        assert await blog_post_repo.list_posts() == []

        await blog_post_repo.update_post(
            post.id, UpdateBlogPost(is_published=1, published_at=datetime.now())
        )
        assert [p.slug for p in await blog_post_repo.list_posts()] == ["soon"]

    async def test_update_missing_raises(self, blog_post_repo: BlogPostRepository):
        with pytest.raises(NotFoundError):
            await blog_post_repo.update_post(31337, UpdateBlogPost(title="x"))

    async def test_delete_post(self, blog_post_repo: BlogPostRepository):
        post = await blog_post_repo.create_post(_post("bye"))

        await blog_post_repo.delete_by_id(post.id)
        assert await blog_post_repo.get_by_id(post.id) is None
        assert await blog_post_repo.get_by_slug("bye") is None


# ============================================================
# Update payload validation
# ============================================================


class TestUpdatePayloads:
    """Required columns can be omitted from a patch but not nulled."""

    @pytest.mark.parametrize(
        "model, field",
        [
            (UpdateProject, "title"),
            (UpdateProject, "description"),
            (UpdateProject, "technologies"),
            (UpdateProject, "is_active"),
            (UpdateProject, "sort_order"),
            (UpdateTechStack, "name"),
            (UpdateTechStack, "category"),
            (UpdateTechStack, "is_active"),
            (UpdateTechStack, "sort_order"),
            (UpdateBlogPost, "title"),
            (UpdateBlogPost, "slug"),
            (UpdateBlogPost, "content"),
            (UpdateBlogPost, "tags"),
            (UpdateBlogPost, "is_published"),
        ],
    )
    def test_null_required_field_rejected(self, model, field):
        with pytest.raises(ValidationError):
            model(**{field: None})

    @pytest.mark.parametrize(
        "model, field",
        [
            (UpdateProject, "image_url"),
            (UpdateProject, "category"),
            (UpdateTechStack, "icon"),
            (UpdateTechStack, "proficiency"),
            (UpdateBlogPost, "excerpt"),
            (UpdateBlogPost, "published_at"),
        ],
    )
    def test_null_nullable_field_accepted(self, model, field):
        patch = model(**{field: None})
        assert patch.model_dump(exclude_unset=True) == {field: None}

    def test_omitted_fields_stay_unset(self):
        assert UpdateProject().model_dump(exclude_unset=True) == {}
        assert UpdateBlogPost(title="Kept").model_dump(exclude_unset=True) == {"title": "Kept"}

    async def test_nulling_nullable_column_persists(self, blog_post_repo: BlogPostRepository):
        post = await blog_post_repo.create_post(
            InsertBlogPost(title="T", slug="with-excerpt", content="c", excerpt="short")
        )

        updated = await blog_post_repo.update_post(post.id, UpdateBlogPost(excerpt=None))
        assert updated.excerpt is None
        assert updated.title == "T"
