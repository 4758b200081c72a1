"""
Deterministic, offline idea generation.
Builds one idea per fixed archetype from the profile and the scoring tables.
"""

from typing import List

from ideaspark.models.idea import BusinessIdea
from ideaspark.models.profile import UserProfile
from ideaspark.services import scoring

AUTOMATABLE_SKILLS = {"Technology", "Finance", "Marketing", "Data Analysis"}
TECH_SKILLS = ["Programming", "Web Development", "Mobile Development", "Data Analysis", "UX/UI Design"]
TEACHING_SKILLS = ["Teaching", "Content Creation", "Public Speaking", "Writing"]


def _first_matching(skills: List[str], candidates: List[str]):
    return next((skill for skill in skills if skill in candidates), None)


class FallbackGenerator:
    """Template-based idea generator used when the model is unavailable."""

    def generate(self, profile: UserProfile) -> List[BusinessIdea]:
        """
        Generate one idea per archetype, in fixed order.

        Args:
            profile: Completed user profile

        Returns:
            Consulting, platform, education and service ideas, in that order

        Raises:
            InvalidProfile: if the profile has no interests or no skills
        """
        profile.ensure_complete()
        archetypes = [
            self.generate_consulting_idea,
            self.generate_platform_idea,
            self.generate_education_idea,
            self.generate_service_idea,
        ]
        return [archetype(profile) for archetype in archetypes]

    def generate_consulting_idea(self, profile: UserProfile) -> BusinessIdea:
        interest = profile.primary_interest
        skill = profile.primary_skill
        secondary_skill = profile.secondary_skill

        return BusinessIdea(
            title=f"{interest} {skill} Consultancy",
            description=(
                f"Launch a specialized consulting firm that combines your expertise in {skill} and "
                f"{secondary_skill} to help businesses in the {interest.lower()} sector optimize their "
                "operations, increase efficiency, and accelerate growth through data-driven strategies "
                "and proven methodologies."
            ),
            category="Consulting",
            startup_cost=scoring.calculate_startup_cost(profile.budget_bracket, "low"),
            difficulty=scoring.calculate_difficulty(profile.expertise_level, "medium"),
            time_to_market="2-4 months",
            potential_revenue=scoring.calculate_revenue(profile.budget_bracket, profile.is_full_time, "consulting"),
            key_steps=[
                "Define your niche and service offerings",
                "Build a professional brand and online presence",
                "Network and establish industry connections",
                "Create case studies and testimonials",
                "Scale through referrals and partnerships",
            ],
            market_insight=scoring.generate_market_insight(interest, "consulting"),
            risk_level=scoring.assess_risk_level(profile.risk_category, "low"),
            unique_value=(
                f"Combines deep {skill} expertise with {interest} industry knowledge to deliver "
                "specialized solutions that generic consultants cannot provide"
            ),
            target_audience=scoring.generate_target_audience(interest, "b2b"),
        )

    def generate_platform_idea(self, profile: UserProfile) -> BusinessIdea:
        interest = profile.primary_interest
        tech_skill = _first_matching(profile.skills, TECH_SKILLS) or "Technology"

        return BusinessIdea(
            title=f"{interest} Digital Marketplace",
            description=(
                f"Create an innovative online platform that connects {interest.lower()} professionals with "
                "clients, featuring advanced matching algorithms, integrated payment systems, and "
                "community-driven features. Monetize through transaction fees, premium memberships, and "
                "value-added services."
            ),
            category="Technology",
            startup_cost=scoring.calculate_startup_cost(profile.budget_bracket, "medium"),
            difficulty=scoring.calculate_difficulty(profile.expertise_level, "high"),
            time_to_market="6-12 months",
            potential_revenue=scoring.calculate_revenue(profile.budget_bracket, profile.is_full_time, "platform"),
            key_steps=[
                "Conduct market research and validate demand",
                "Design user experience and technical architecture",
                "Develop MVP with core features",
                "Launch beta and gather user feedback",
                "Scale platform and add advanced features",
            ],
            market_insight=scoring.generate_market_insight(interest, "technology"),
            risk_level=scoring.assess_risk_level(profile.risk_category, "medium-high"),
            unique_value=(
                f"Leverages {tech_skill} expertise to create a specialized platform that addresses "
                f"specific pain points in the {interest} market"
            ),
            target_audience=scoring.generate_target_audience(interest, "b2b2c"),
        )

    def generate_education_idea(self, profile: UserProfile) -> BusinessIdea:
        interest = profile.primary_interest
        teaching_skill = _first_matching(profile.skills, TEACHING_SKILLS) or profile.primary_skill

        return BusinessIdea(
            title=f"{interest} Mastery Academy",
            description=(
                "Develop a comprehensive online education platform offering courses, workshops, and "
                f"certification programs in {interest.lower()}. Combine your {teaching_skill.lower()} skills "
                "with cutting-edge learning technologies to create engaging, results-driven educational "
                "experiences for professionals and enthusiasts."
            ),
            category="Education",
            startup_cost=scoring.calculate_startup_cost(profile.budget_bracket, "low-medium"),
            difficulty=scoring.calculate_difficulty(profile.expertise_level, "medium"),
            time_to_market="3-6 months",
            potential_revenue=scoring.calculate_revenue(profile.budget_bracket, profile.is_full_time, "education"),
            key_steps=[
                "Identify learning gaps and curriculum opportunities",
                "Create high-quality educational content",
                "Build learning platform and user experience",
                "Launch with pilot group and gather feedback",
                "Scale through marketing and partnerships",
            ],
            market_insight=scoring.generate_market_insight(interest, "education"),
            risk_level=scoring.assess_risk_level(profile.risk_category, "low-medium"),
            unique_value=(
                f"Combines {teaching_skill} expertise with {interest} knowledge to deliver practical, "
                "actionable learning experiences"
            ),
            target_audience=scoring.generate_target_audience(interest, "b2c"),
        )

    def generate_service_idea(self, profile: UserProfile) -> BusinessIdea:
        """Automated service when the primary skill automates well, premium otherwise."""
        interest = profile.primary_interest
        skill = profile.primary_skill
        automated = skill in AUTOMATABLE_SKILLS

        if automated:
            return BusinessIdea(
                title=f"Automated {interest} Solutions",
                description=(
                    "Build a technology-driven service business that solves critical problems in the "
                    f"{interest.lower()} industry. Leverage your {skill.lower()} skills to create scalable, "
                    "automated solutions that deliver measurable results for clients."
                ),
                category="Technology",
                startup_cost=scoring.calculate_startup_cost(profile.budget_bracket, "medium"),
                difficulty=scoring.calculate_difficulty(profile.expertise_level, "high"),
                time_to_market="4-8 months",
                potential_revenue=scoring.calculate_revenue(profile.budget_bracket, profile.is_full_time, "saas"),
                key_steps=self._service_steps("Develop automated solution", "Scale through automation"),
                market_insight=scoring.generate_market_insight(interest, "automation"),
                risk_level=scoring.assess_risk_level(profile.risk_category, "medium"),
                unique_value=(
                    f"Applies {skill} expertise to deliver scalable, efficient solutions in the {interest} market"
                ),
                target_audience=scoring.generate_target_audience(interest, "b2b"),
            )

        return BusinessIdea(
            title=f"Premium {interest} Solutions",
            description=(
                "Build a high-touch service business that solves critical problems in the "
                f"{interest.lower()} industry. Leverage your {skill.lower()} skills to create personalized, "
                "premium services that deliver measurable results for clients."
            ),
            category="Services",
            startup_cost=scoring.calculate_startup_cost(profile.budget_bracket, "low"),
            difficulty=scoring.calculate_difficulty(profile.expertise_level, "medium"),
            time_to_market="2-4 months",
            potential_revenue=scoring.calculate_revenue(profile.budget_bracket, profile.is_full_time, "service"),
            key_steps=self._service_steps(
                "Design service delivery process", "Grow through referrals and team expansion"
            ),
            market_insight=scoring.generate_market_insight(interest, "services"),
            risk_level=scoring.assess_risk_level(profile.risk_category, "low"),
            unique_value=(
                f"Applies {skill} expertise to deliver personalized, high-quality solutions in the {interest} market"
            ),
            target_audience=scoring.generate_target_audience(interest, "b2b"),
        )

    @staticmethod
    def _service_steps(delivery_step: str, growth_step: str) -> List[str]:
        return [
            "Identify high-value problem to solve",
            delivery_step,
            "Test with pilot customers",
            "Refine offering based on feedback",
            growth_step,
        ]
