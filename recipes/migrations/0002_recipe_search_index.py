from django.db import migrations


def create_search_index(apps, schema_editor):
    """GIN full-text index; other backends fall back to a substring scan."""
    if schema_editor.connection.vendor != "postgresql":
        return
    from recipes.search import search_index

    Recipe = apps.get_model("recipes", "Recipe")
    schema_editor.add_index(Recipe, search_index())


def drop_search_index(apps, schema_editor):
    if schema_editor.connection.vendor != "postgresql":
        return
    from recipes.search import search_index

    Recipe = apps.get_model("recipes", "Recipe")
    schema_editor.remove_index(Recipe, search_index())


class Migration(migrations.Migration):

    dependencies = [
        ("recipes", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_search_index, drop_search_index),
    ]
