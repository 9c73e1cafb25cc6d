"""
Investor questionnaire.

Modules
-------
wizard : QuestionnaireDraft + STEPS + step predicates + complete() -> InvestorProfile.
"""
