from django.db.models import Q
from django.test import TestCase
from recipes.db_accessor import DB_Accessor
from recipes.models import Recipe
from recipes.tests.helpers import make_recipe, make_user


class DBAccessorTests(TestCase):

    def setUp(self):
        self.user = make_user()
        self.obj1 = make_recipe(author=self.user, title="Soup", category="Dinner")
        self.obj2 = make_recipe(author=self.user, title="Cake", category="Dessert")

        self.repo = DB_Accessor(Recipe)

    # ---------- list() ----------

    def test_list_default_returns_queryset(self):
        qs = self.repo.list()
        self.assertEqual(qs.count(), 2)

    def test_list_filters(self):
        qs = self.repo.list(filters={"title": "Soup"})
        self.assertEqual(qs.count(), 1)
        self.assertEqual(qs.first().title, "Soup")

    def test_list_accepts_q_objects(self):
        qs = self.repo.list(filters=Q(title="Soup") | Q(title="Cake"))
        self.assertEqual(qs.count(), 2)

    def test_list_order_by(self):
        qs = self.repo.list(order_by=["title"])
        titles = list(qs.values_list("title", flat=True))
        self.assertEqual(titles, ["Cake", "Soup"])

    def test_list_limit_and_offset(self):
        qs = self.repo.list(limit=1, order_by=["title"])
        self.assertEqual([r.title for r in qs], ["Cake"])

        qs_offset = self.repo.list(limit=1, offset=1, order_by=["title"])
        self.assertEqual([r.title for r in qs_offset], ["Soup"])

    def test_list_offset_past_end(self):
        self.assertEqual(list(self.repo.list(offset=10, limit=5)), [])

    def test_list_as_dict(self):
        rows = self.repo.list(filters={"title": "Soup"}, as_dict=True)
        self.assertEqual(rows[0]["title"], "Soup")

    def test_list_on_given_queryset(self):
        base = Recipe.objects.filter(category="Dessert")
        self.assertEqual([r.title for r in self.repo.list(qs=base)], ["Cake"])

    # ---------- count/get/create/update/delete ----------

    def test_count(self):
        self.assertEqual(self.repo.count(), 2)
        self.assertEqual(self.repo.count({"category": "Dinner"}), 1)

    def test_get(self):
        self.assertEqual(self.repo.get(title="Cake"), self.obj2)

    def test_create(self):
        obj = self.repo.create(
            author=self.user, title="Tea", description="hot", cooking_time=1, prep_time=1,
            servings=1, category="Beverage", cuisine="British",
        )
        self.assertTrue(Recipe.objects.filter(pk=obj.pk).exists())

    def test_update(self):
        updated = self.repo.update({"pk": self.obj1.pk}, title="Stew")
        self.assertEqual(updated, 1)
        self.assertEqual(Recipe.objects.get(pk=self.obj1.pk).title, "Stew")

    def test_increment_and_floor(self):
        self.repo.increment({"pk": self.obj1.pk}, "views", 3)
        self.repo.increment({"pk": self.obj1.pk}, "views", -5)
        self.assertEqual(Recipe.objects.get(pk=self.obj1.pk).views, 0)

    def test_delete(self):
        self.assertGreaterEqual(self.repo.delete(title="Soup"), 1)
        self.assertEqual(self.repo.count(), 1)
