"""Prompt construction for the AI chef.

Turns a persona config into a system prompt, and a chat or recipe request
into the full text sent to the model. Plain string interpolation; every
function here is pure. User-supplied values (names, ingredients, tools,
preferences) are copied verbatim into the output.
"""

from typing import Optional

from chefmate.models.models import (
    ChatContext,
    ChefConfig,
    ChefPersonality,
    RecipeParameters,
    SpeakingStyle,
)


PERSONALITY_PROMPTS: dict[str, str] = {
    "professional": "정확하고 전문적인 설명을 제공합니다. 요리 용어를 정확히 사용하고, 체계적으로 안내합니다.",
    "friendly": "친근하고 편안한 친구처럼 대화합니다. 격의 없이 말하며, 재미있는 요리 경험을 제공합니다.",
    "motherly": "따뜻하고 다정한 엄마처럼 케어합니다. 꼼꼼하게 챙기고, 격려와 칭찬을 아끼지 않습니다.",
    "coach": "열정적인 코치처럼 동기부여합니다. 할 수 있다는 자신감을 주고, 도전을 격려합니다.",
    "scientific": "요리 과학을 설명합니다. 왜 이렇게 해야 하는지, 화학적/물리적 원리를 쉽게 풀어줍니다.",
}
DEFAULT_CUSTOM_PERSONALITY = "사용자 맞춤 성격입니다."

FORMALITY_PROMPTS: dict[str, str] = {
    "formal": "존댓말을 사용합니다.",
    "casual": "반말을 사용합니다.",
}

EMOJI_PROMPTS: dict[str, str] = {
    "high": "이모지를 적극적으로 사용합니다 (문장마다 1-2개).",
    "medium": "이모지를 적절히 사용합니다 (중요한 포인트에만).",
    "low": "이모지를 최소한으로 사용합니다.",
    "none": "이모지를 사용하지 않습니다.",
}

TECHNICALITY_PROMPTS: dict[str, str] = {
    "expert": "전문 요리 용어를 자유롭게 사용합니다.",
    "general": "일반인이 이해하기 쉬운 용어를 사용합니다.",
    "beginner": "완전 초보자도 이해할 수 있도록 쉽게 설명합니다.",
}

DEFAULT_COOKING_PHILOSOPHY = "맛있고 건강한 요리를 쉽게 만들 수 있도록 돕습니다."

# Constant for every persona; never parameterized.
ABSOLUTE_RULES = """## 절대 규칙
1. 다른 사용자의 정보를 절대 참조하지 마세요.
2. 이 사용자의 개인정보를 외부에 공유하지 마세요.
3. 요리와 관련된 질문에만 답변하세요.
4. 안전하지 않은 요리 방법은 경고와 함께 올바른 방법을 안내하세요.
5. 항상 사용자의 보유 재료와 도구를 고려하여 현실적인 조언을 제공하세요."""

NO_PREFERENCE = "상관없음"

RECIPE_RESPONSE_FORMAT = """## 응답 형식 (JSON)
다음 형식으로 응답해주세요:
```json
{
  "title": "요리명",
  "description": "한 줄 설명",
  "cuisine": "요리 스타일",
  "difficulty": "easy|medium|hard",
  "cookingTime": 조리시간(분),
  "servings": 인원수,
  "ingredients": [
    {
      "name": "재료명",
      "quantity": "양",
      "unit": "단위",
      "isAvailable": true/false,
      "substitute": "대체 재료 (없으면 null)"
    }
  ],
  "tools": [
    {
      "name": "도구명",
      "isAvailable": true/false,
      "alternative": "대체 방법 (없으면 null)"
    }
  ],
  "instructions": [
    {
      "step": 1,
      "title": "단계 제목",
      "description": "상세 설명",
      "time": 소요시간(분),
      "tips": "팁 (없으면 null)"
    }
  ],
  "nutrition": {
    "calories": 칼로리,
    "protein": 단백질(g),
    "carbs": 탄수화물(g),
    "fat": 지방(g)
  },
  "chefNote": "셰프의 한마디"
}
```"""


def get_personality_prompt(personality: ChefPersonality, custom_personality: Optional[str] = None) -> str:
    """Behavioral description for a personality. ``custom`` uses the free-text override."""
    if personality == "custom":
        return custom_personality or DEFAULT_CUSTOM_PERSONALITY
    return PERSONALITY_PROMPTS[personality]


def get_speaking_style_prompt(style: SpeakingStyle) -> str:
    """Formality, emoji and technicality sentences, in that order, space-joined."""
    return " ".join(
        (
            FORMALITY_PROMPTS[style.formality],
            EMOJI_PROMPTS[style.emoji_usage],
            TECHNICALITY_PROMPTS[style.technicality],
        )
    )


def generate_chef_system_prompt(config: ChefConfig) -> str:
    """Render a persona config as the system prompt shared by chat and recipe requests.

    Sections, in order: name, expertise, personality, speaking style,
    cooking philosophy, and the fixed absolute rules.
    """
    return f"""당신의 이름은 "{config.name}"입니다.
당신은 {", ".join(config.expertise)} 요리를 전문으로 하는 AI 셰프입니다.

## 성격
{get_personality_prompt(config.personality, config.custom_personality)}

## 말투 스타일
{get_speaking_style_prompt(config.speaking_style)}

## 요리 철학
{config.cooking_philosophy or DEFAULT_COOKING_PHILOSOPHY}

{ABSOLUTE_RULES}"""


def build_context_block(context: Optional[ChatContext]) -> str:
    """Render the user's kitchen inventory. Empty lists are left out entirely."""
    if context is None:
        return ""

    block = ""
    if context.ingredients:
        block += f"\n\n[보유 재료]: {', '.join(context.ingredients)}"
    if context.tools:
        block += f"\n[보유 도구]: {', '.join(context.tools)}"
    return block


def generate_chat_prompt(message: str, config: ChefConfig, context: Optional[ChatContext] = None) -> str:
    """Full single-shot chat prompt: system prompt, inventory, then the user message."""
    return f"{generate_chef_system_prompt(config)}{build_context_block(context)}\n\n사용자: {message}"


def generate_chat_greeting(config: ChefConfig) -> str:
    """Opening line the model speaks when a multi-turn session starts."""
    return f"안녕하세요! {config.name}입니다. 오늘 어떤 요리를 도와드릴까요?"


def generate_recipe_prompt(request: RecipeParameters, config: ChefConfig) -> str:
    """System prompt followed by the user's inventory, preferences and the JSON response schema."""
    preferences = request.preferences
    cooking_time = f"{preferences.cooking_time}분 이내" if preferences.cooking_time else NO_PREFERENCE

    return f"""{generate_chef_system_prompt(config)}

## 사용자 정보
- 보유 재료: {", ".join(request.ingredients)}
- 보유 도구: {", ".join(request.tools)}
- 선호 요리 스타일: {preferences.cuisine or NO_PREFERENCE}
- 난이도: {preferences.difficulty or NO_PREFERENCE}
- 조리 시간: {cooking_time}
- 인원: {preferences.servings or 1}인분

## 요청
위 재료와 도구로 만들 수 있는 맞춤 레시피를 추천해주세요.

{RECIPE_RESPONSE_FORMAT}"""
