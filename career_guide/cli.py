"""
Карьерный тест в терминале

Ходит в запущенный API через QuizController, как и веб-клиент:
    career-guide-quiz --base-url http://localhost:8080
"""
import argparse
import asyncio
import sys
from typing import Optional

from career_guide.core.logging_config import setup_logging
from career_guide.quiz.client import CareerQuizClient
from career_guide.quiz.controller import QuizController
from career_guide.schemas.quiz import CareerResult


def format_result(rank: int, result: CareerResult) -> str:
    lines = [
        f"{rank}. {result.title} ({result.match_score}% match)",
        f"   {result.summary}",
        f"   Salary: ${result.salary_min:,.0f} - ${result.salary_max:,.0f}",
        f"   Education: {result.education}",
    ]
    if result.skills:
        lines.append(f"   Skills: {', '.join(result.skills)}")
    return "\n".join(lines)


def prompt_choice(controller: QuizController) -> Optional[str]:
    """Показать вопрос, вернуть value выбранного варианта или команду b/q"""
    question = controller.current_question
    print(f"\n[{controller.progress:.0f}%] Question {controller.step + 1}/{controller.total_questions}")
    print(question.question)
    for i, option in enumerate(question.options, 1):
        marker = "*" if controller.answers.get(controller.step) == option.value else " "
        print(f"  {marker}{i}) {option.label}")

    while True:
        raw = input("Choose [1-%d], b=back, q=quit: " % len(question.options)).strip().lower()
        if raw in ("b", "q"):
            return raw
        if raw.isdigit() and 1 <= int(raw) <= len(question.options):
            return question.options[int(raw) - 1].value
        print("Invalid choice")


async def run_quiz(base_url: str, token: Optional[str]) -> int:
    client = CareerQuizClient.connect(base_url, token=token)
    controller = QuizController(client)

    try:
        while controller.phase.name != "results":
            choice = prompt_choice(controller)
            if choice == "q":
                return 1
            if choice == "b":
                controller.go_back()
                continue

            controller.submit_answer(choice)
            if controller.is_last_question:
                print("\nThinking..." if controller.phase.name == "phase1" else "\nCalculating your results...")
            await controller.go_next()

            if controller.error:
                print(f"\nSorry, something went wrong: {controller.error}")
                again = input("r=retry, s=start over, q=quit: ").strip().lower()
                if again == "s":
                    controller.retake()
                elif again == "q":
                    return 1
    finally:
        await client.aclose()

    print("\n" + "=" * 60)
    print("YOUR CAREER MATCHES")
    print("=" * 60)
    for rank, result in enumerate(controller.results, 1):
        print(format_result(rank, result))
    if controller.session_id:
        print(f"\nSaved as session {controller.session_id}")
    return 0


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Take the AI career quiz in your terminal")
    parser.add_argument("--base-url", default="http://localhost:8080", help="Career Guide API URL")
    parser.add_argument("--token", default=None, help="Bearer token to save the session to your history")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    try:
        return asyncio.run(run_quiz(args.base_url, args.token))
    except (KeyboardInterrupt, EOFError):
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main())
