"""Text-generation providers and the slide plan generator"""
from .ai_provider import AIProvider
from .plan_generator import SlidePlanGenerator, PlanItem, PlanFormatError, parse_plan

__all__ = ['AIProvider', 'SlidePlanGenerator', 'PlanItem', 'PlanFormatError', 'parse_plan']
