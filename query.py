#!/usr/bin/env python3
"""Ad hoc query runner for the AI chef.

Talk to a chef persona directly through the Gemini gateway, without starting
the API server.

Usage:
    python query.py "김치찌개 맛있게 끓이는 법 알려줘"
    python query.py --preset michelin_chef "How do I sear scallops?"
    python query.py --recipe "양파,당근,계란" --tools "프라이팬" --time 20 --servings 2
    python query.py --debug --recipe "두부,김치"  # Show full JSON result
    python query.py --interactive --preset friendly_buddy  # Multi-turn session
    python query.py --list-presets

Features:
- Single chat message rendered as markdown
- Recipe generation rendered as a formatted recipe (or raw text fallback)
- Debug mode to display the full JSON result
- Interactive multi-turn chat primed with the persona
- Clean exit after completion
"""

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from chefmate.models.models import ChatContext, ChefPreset, GeneratedRecipe, RecipeParameters, RecipePreferences
from chefmate.presets.presets import CHEF_PRESETS, find_preset_by_id
from chefmate.services.gemini import create_chat_session, generate_recipe, send_message
from chefmate.utils.config import config
from chefmate.utils.logger import logger

console = Console()


def split_list(value: Optional[str]) -> list[str]:
    """Split a comma-separated CLI value into trimmed, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def render_recipe_markdown(recipe: dict[str, Any]) -> str:
    """Render a recipe result as markdown.

    Structured recipes get title, ingredients, steps, nutrition and the chef's
    note. Raw-text results and dicts that do not fit the recipe shape are
    returned as their text.
    """
    if "rawText" in recipe:
        return recipe["rawText"]

    try:
        parsed = GeneratedRecipe.model_validate(recipe)
    except ValidationError as e:
        logger.debug(f"Recipe does not match the expected shape: {e}")
        return f"```json\n{json.dumps(recipe, ensure_ascii=False, indent=2)}\n```"

    lines = [f"# {parsed.title}", "", parsed.description, "", "## 재료"]
    for ingredient in parsed.ingredients:
        amount = " ".join(str(part) for part in (ingredient.quantity, ingredient.unit) if part)
        lines.append(f"- {ingredient.name} {amount}".rstrip())

    lines += ["", "## 조리 순서"]
    for instruction in parsed.instructions:
        duration = f" ({instruction.time}분)" if instruction.time else ""
        lines.append(f"{instruction.step}. **{instruction.title}**{duration}: {instruction.description}")
        if instruction.tips:
            lines.append(f"   - 팁: {instruction.tips}")

    if parsed.nutrition:
        n = parsed.nutrition
        lines += [
            "",
            "## 영양 정보",
            f"칼로리 {n.calories} kcal · 단백질 {n.protein} g · 탄수화물 {n.carbs} g · 지방 {n.fat} g",
        ]

    if parsed.chef_note:
        lines += ["", f"> {parsed.chef_note}"]

    return "\n".join(lines)


def print_presets() -> None:
    table = Table(title="AI 셰프 프리셋")
    table.add_column("id", style="cyan")
    table.add_column("")
    table.add_column("이름")
    table.add_column("셰프")
    table.add_column("전문 분야")
    for preset in CHEF_PRESETS:
        table.add_row(preset.id, preset.emoji, preset.name, preset.config.name, ", ".join(preset.config.expertise))
    console.print(table)


def resolve_preset(preset_id: str) -> ChefPreset:
    preset = find_preset_by_id(preset_id)
    if preset is None:
        console.print(f"[red]✗ Unknown preset: {preset_id}. Use --list-presets to see available ids.[/red]")
        sys.exit(1)
    return preset


async def run_chat(message: str, preset: ChefPreset, context: Optional[ChatContext], debug: bool) -> None:
    response = await send_message(message, preset.config, context)
    if debug:
        console.print_json(data={"response": response})
    console.print(Markdown(response))


async def run_recipe(request: RecipeParameters, preset: ChefPreset, debug: bool) -> None:
    recipe = await generate_recipe(request, preset.config)
    if debug:
        console.print("[bold cyan]Debug Mode: Full Result[/bold cyan]")
        console.print_json(data=recipe)
        console.print()
    console.print(Markdown(render_recipe_markdown(recipe)))


def run_interactive(preset: ChefPreset) -> None:
    """Multi-turn chat until an empty line or Ctrl-D."""
    chat = create_chat_session(preset.config)
    console.print(f"[bold]{preset.emoji} {preset.config.name}[/bold] (빈 줄 입력 시 종료)")
    while True:
        try:
            message = console.input("[green]> [/green]").strip()
        except EOFError:
            break
        if not message:
            break
        response = chat.send_message(message)
        console.print(Markdown(response.text or ""))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Talk to an AI chef persona from the terminal.")
    parser.add_argument("message", nargs="*", help="Chat message (omit with --recipe or --interactive)")
    parser.add_argument("--preset", default=config.DEFAULT_PRESET_ID, help="Chef preset id")
    parser.add_argument("--debug", action="store_true", help="Print the full JSON result")
    parser.add_argument("--list-presets", action="store_true", help="List chef presets and exit")
    parser.add_argument("--interactive", action="store_true", help="Multi-turn chat session")
    parser.add_argument("--recipe", metavar="INGREDIENTS", help="Comma-separated ingredients; generates a recipe")
    parser.add_argument("--tools", help="Comma-separated tools (recipe mode and chat context)")
    parser.add_argument("--ingredients", help="Comma-separated ingredients as chat context")
    parser.add_argument("--cuisine")
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"])
    parser.add_argument("--time", type=int, dest="cooking_time", help="Max cooking time in minutes")
    parser.add_argument("--servings", type=int)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.list_presets:
        print_presets()
        return

    preset = resolve_preset(args.preset)

    try:
        if args.interactive:
            run_interactive(preset)
        elif args.recipe:
            request = RecipeParameters(
                ingredients=split_list(args.recipe),
                tools=split_list(args.tools),
                preferences=RecipePreferences(
                    cuisine=args.cuisine,
                    difficulty=args.difficulty,
                    cooking_time=args.cooking_time,
                    servings=args.servings,
                ),
            )
            asyncio.run(run_recipe(request, preset, args.debug))
        elif args.message:
            context = None
            if args.ingredients or args.tools:
                context = ChatContext(ingredients=split_list(args.ingredients), tools=split_list(args.tools))
            asyncio.run(run_chat(" ".join(args.message), preset, context, args.debug))
        else:
            build_parser().print_usage()
            sys.exit(1)
    except KeyboardInterrupt:
        logger.info("\nQuery interrupted by user.")
        sys.exit(0)
    except ValidationError as e:
        console.print(f"[red]✗ Invalid input: {e}[/red]")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Query execution failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
