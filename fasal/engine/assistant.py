import logging
from functools import lru_cache
from typing import Optional
from langchain_openai import ChatOpenAI
from langchain_core.prompts import ChatPromptTemplate
from fasal.config import settings
from fasal.schema import ChatContext, Language

logger = logging.getLogger(__name__)

@lru_cache(maxsize=1)
def _get_llm() -> ChatOpenAI:
    return ChatOpenAI(
        model=settings.openai_model,
        temperature=0.7,
        api_key=settings.openai_api_key,
        max_tokens=800,
        timeout=20,                                  # guard against long hangs
        max_retries=1,
    )

_PROMPT = ChatPromptTemplate.from_messages([
    ("system",
     "You are FASAL AI, an expert agricultural advisor for Indian farmers. You know Indian crops and "
     "their seasons (Kharif, Rabi, Zaid), soil nutrients and pH, pest and disease management, weather "
     "impact, irrigation, market trends, government schemes and organic practices.\n"
     "Give practical, actionable advice in simple, farmer-friendly language with specific quantities, "
     "timings and methods. Prefer cost-effective, locally available, safe and sustainable options. "
     "Use local units (bigha, acre, quintal).\n"
     "Respond primarily in {language_name}.\n"
     "{context}"),
    ("user", "{message}"),
])

_FALLBACK = {
    "en": "Sorry, the farming assistant is unavailable right now. Please try again in a few minutes "
          "or contact your nearest Krishi Vigyan Kendra.",
    "hi": "क्षमा करें, कृषि सहायक अभी उपलब्ध नहीं है। कृपया कुछ मिनट बाद फिर से प्रयास करें "
          "या अपने नज़दीकी कृषि विज्ञान केंद्र से संपर्क करें।",
}

def _context_block(ctx: Optional[ChatContext]) -> str:
    if not ctx:
        return ""
    return ("User's context:\n"
            f"- Location: {ctx.location or 'Not specified'}\n"
            f"- Previous crops: {ctx.previousCrops or 'Not specified'}\n"
            f"- Farm area: {ctx.farmArea or 'Not specified'}\n"
            f"- Current season: {ctx.season or 'Not specified'}")

def ask(message: str, language: Language = "en", context: Optional[ChatContext] = None) -> str:
    msg = _PROMPT.format_messages(
        language_name="Hindi (Devanagari script)" if language == "hi" else "English",
        context=_context_block(context),
        message=message,
    )
    try:
        resp = _get_llm().invoke(msg)
        text = (getattr(resp, "content", "") or "").strip()
        if text:
            logger.info("Assistant answered message: %.50s", message)
            return text
        logger.warning("Assistant returned an empty response")
    except Exception:
        logger.exception("Assistant call failed")
    return _FALLBACK[language]
