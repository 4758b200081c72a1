import json
from typing import List

import typer

from ideaspark.exceptions import InvalidProfile
from ideaspark.factory import create_idea_service
from ideaspark.models.profile import UserProfile
from ideaspark.services.validation_service import ValidationService
from ideaspark.utils.config import Config
from ideaspark.utils.logger import configure_logging, logger

app = typer.Typer()


def _build_profile(interest, skill, budget, expertise, time_commitment, risk_tolerance) -> UserProfile:
    return UserProfile(
        interests=interest,
        skills=skill,
        budget=budget,
        expertise=expertise,
        time_commitment=time_commitment,
        risk_tolerance=risk_tolerance,
    )


def _load_config() -> Config:
    config = Config()
    configure_logging(config)
    return config


@app.command()
def generate(
    interest: List[str] = typer.Option(..., "--interest", "-i", help="Interest, primary first. Repeatable."),
    skill: List[str] = typer.Option(..., "--skill", "-s", help="Skill, primary first. Repeatable."),
    budget: str = typer.Option("$1,000 - $5,000", help="Startup budget bracket"),
    expertise: str = typer.Option("Some business knowledge - Basic understanding", help="Experience level"),
    time_commitment: str = typer.Option("Part-time (10-20 hours)", help="Weekly time commitment"),
    risk_tolerance: str = typer.Option("Moderate - Balanced risk and reward", help="Risk tolerance"),
):
    """
    Generate business ideas for a profile and print them as JSON.
    """
    service = create_idea_service(_load_config())
    profile = _build_profile(interest, skill, budget, expertise, time_commitment, risk_tolerance)

    try:
        result = service.generate_with_source(profile)
    except InvalidProfile as e:
        typer.echo(f"Invalid profile: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info(f"Generated {len(result.ideas)} ideas ({result.source.value})")
    typer.echo(json.dumps([idea.to_dict() for idea in result.ideas], indent=2))


@app.command()
def validate(
    interest: List[str] = typer.Option(..., "--interest", "-i", help="Interest, primary first. Repeatable."),
    skill: List[str] = typer.Option(..., "--skill", "-s", help="Skill, primary first. Repeatable."),
    budget: str = typer.Option("$1,000 - $5,000", help="Startup budget bracket"),
    expertise: str = typer.Option("Some business knowledge - Basic understanding", help="Experience level"),
    time_commitment: str = typer.Option("Part-time (10-20 hours)", help="Weekly time commitment"),
    risk_tolerance: str = typer.Option("Moderate - Balanced risk and reward", help="Risk tolerance"),
    index: int = typer.Option(0, help="Position of the idea to validate"),
):
    """
    Generate ideas, then print the validation report for one of them.
    """
    service = create_idea_service(_load_config())
    profile = _build_profile(interest, skill, budget, expertise, time_commitment, risk_tolerance)

    try:
        ideas = service.generate(profile)
    except InvalidProfile as e:
        typer.echo(f"Invalid profile: {e}", err=True)
        raise typer.Exit(code=1)

    if not 0 <= index < len(ideas):
        typer.echo(f"No idea at position {index}; {len(ideas)} generated", err=True)
        raise typer.Exit(code=1)

    idea = ideas[index]
    validation_service = ValidationService()
    report = {
        "idea": idea.to_dict(),
        "validation": validation_service.validate_business_idea(idea, profile).model_dump(by_alias=True),
        "competitors": [
            competitor.model_dump(by_alias=True)
            for competitor in validation_service.get_competitor_analysis(idea.category)
        ],
        "financials": validation_service.generate_financial_projection(idea, profile).model_dump(by_alias=True),
    }
    typer.echo(json.dumps(report, indent=2))


@app.command()
def check_connection():
    """
    Check that the text-generation endpoint is configured and answering.
    """
    service = create_idea_service(_load_config())
    if service.test_connection():
        typer.echo("Connection OK")
    else:
        typer.echo("Connection failed or API key not configured", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
