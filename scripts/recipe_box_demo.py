import argparse
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from recipe_keeper.app.domain.errors import RecipeValidationError
from recipe_keeper.services.recipe_box import (
    SAMPLE_OTHER_USER_RECIPE,
    RecipeBox,
    render_recipe,
    render_recipe_list,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Recipe box smoke test")
    parser.add_argument("--user", default="user-123")
    parser.add_argument("--title", default="Garlic Chicken")
    parser.add_argument("--ingredients", default="Chicken, Garlic, Salt")
    parser.add_argument(
        "--instructions",
        default="Marinate the chicken.\nBake for 30 minutes.",
        help="One step per line",
    )
    parser.add_argument("--photo-url", default="")
    parser.add_argument("--search", default="garlic, tomato")
    parser.add_argument("--mode", choices=["any", "all"], default="any")
    parser.add_argument("--skip-save", action="store_true", help="Do not copy the sample recipe")
    args = parser.parse_args()

    box = RecipeBox(args.user)

    try:
        box.add_recipe_from_form(args.title, args.ingredients, args.instructions, args.photo_url)
    except RecipeValidationError as exc:
        print("Invalid recipe:")
        for field, message in exc.errors.items():
            print(f"  {field}: {message}")

    if not args.skip_save:
        print("=== Explore Recipes")
        print(render_recipe(SAMPLE_OTHER_USER_RECIPE))
        box.save_recipe_from_user(SAMPLE_OTHER_USER_RECIPE)
        print("This recipe has been copied into your collection.\n")

    results = box.search_text(args.search, args.mode)
    print(f"=== Search ({args.mode}): {args.search}")
    if results:
        for recipe in results:
            names = ", ".join(item.display_name for item in recipe.ingredients)
            print(f"- {recipe.title} ({names})")
    else:
        print("No recipes matched.")

    print()
    print(render_recipe_list(box.recipes))


if __name__ == "__main__":
    main()
