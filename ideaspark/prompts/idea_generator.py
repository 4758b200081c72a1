import json

from ideaspark.models.profile import UserProfile

EXAMPLE_IDEA = {
    "title": "AI-Powered Marketing Consultancy",
    "description": "Help small businesses leverage AI tools for marketing automation and customer insights...",
    "category": "Consulting",
    "startupCost": "$2,000 - $5,000",
    "difficulty": 3,
    "timeToMarket": "2-4 months",
    "potentialRevenue": "$8K - $30K monthly",
    "keySteps": [
        "Define service offerings",
        "Build AI tool stack",
        "Create case studies",
        "Launch marketing",
        "Scale operations",
    ],
    "marketInsight": "AI marketing tools market growing 25% annually as SMBs seek competitive advantages",
    "riskLevel": "Medium",
    "uniqueValue": "Combines technical AI knowledge with marketing expertise for underserved SMB market",
    "targetAudience": "Small to medium businesses with 10-100 employees seeking marketing automation",
}


def build_prompt(profile: UserProfile, idea_count: int = 4) -> str:
    example = json.dumps([EXAMPLE_IDEA], indent=2)

    return f"""You are an expert business consultant and entrepreneur with deep knowledge of market trends, business models, and startup strategies. Generate {idea_count} unique, personalized business ideas based on the following user profile:

**User Profile:**
- Interests: {", ".join(profile.interests)}
- Skills: {", ".join(profile.skills)}
- Budget: {profile.budget}
- Experience Level: {profile.expertise}
- Time Commitment: {profile.time_commitment}
- Risk Tolerance: {profile.risk_tolerance}

**Requirements:**
1. Each idea should be realistic and actionable given the user's profile
2. Ideas should leverage the user's existing skills and interests
3. Consider the user's budget constraints and risk tolerance
4. Provide diverse business models (consulting, technology, services, products)
5. Include market validation and competitive analysis insights

**For each business idea, provide:**
- title: Compelling, specific business name/concept
- description: 2-3 sentences explaining the business concept and value proposition
- category: Primary business category (Technology, Consulting, Education, Services, etc.)
- startupCost: Realistic range based on user's budget (e.g., "$2,000 - $8,000")
- difficulty: Number from 1-5 (1=very easy, 5=very challenging)
- timeToMarket: Realistic timeline (e.g., "3-6 months")
- potentialRevenue: Monthly revenue potential (e.g., "$5K - $25K monthly")
- keySteps: 5 specific, actionable implementation steps
- marketInsight: Current market trends and opportunities (1-2 sentences)
- riskLevel: Low, Medium, or High based on market conditions
- uniqueValue: What makes this opportunity special for this user
- targetAudience: Specific customer segments to focus on

**Format your response as a valid JSON array with {idea_count} business idea objects. Each object should have all the fields listed above. Ensure the JSON is properly formatted and can be parsed.**

Example format:
{example}

Generate {idea_count} unique, high-quality business ideas now:"""
