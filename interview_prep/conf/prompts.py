"""Prompts and canned texts used by the interview service."""

# Question generation
QUESTION_GENERATION_SYSTEM_PROMPT: str = """You are an experienced hiring manager preparing a candidate interview. You write clear, professional questions that are specific to the role and its requirements."""

QUESTION_GENERATION_PROMPT: str = """Based on the following Job Description, generate exactly {question_count} interview questions that would be asked to a candidate. Make them specific to the role and requirements mentioned.

Job Description:
{jd_text}

Format your response as a numbered list (1., 2., 3.) with clear, professional interview questions."""

# Used when the LLM is unavailable
FALLBACK_QUESTIONS: str = """1. Can you tell me about your experience related to the responsibilities mentioned in this role?

2. What skills and qualifications do you possess that make you a good fit for this position?

3. Can you provide specific examples from your background that demonstrate your ability to succeed in this role?"""


# Answer evaluation
RESPONSE_EVALUATION_SYSTEM_PROMPT: str = """You are an interview evaluator. Evaluate the candidate's response to the interview question based on their resume."""

RESPONSE_EVALUATION_PROMPT: str = """Question: {question}

Candidate's Response: {answer}

Resume Information:
{context}

Provide:
1. A score from 1-10 (where 10 is excellent)
2. Constructive feedback (max 100 words) on their answer

Format your response as:
SCORE: [number]
FEEDBACK: [your feedback here]"""

# Keyword-heuristic feedback, used when the LLM is unavailable
FEEDBACK_TOO_BRIEF: str = "Your answer is too brief. Try to provide more detailed examples and expand on your experience."
FEEDBACK_SHORT_RELEVANT: str = "Good start! Your answer references relevant experience. Consider adding more specific examples and details."
FEEDBACK_SHORT_GENERIC: str = "Your answer is okay, but try to connect it more closely to your resume and provide concrete examples."
FEEDBACK_LONG_RELEVANT: str = "Great answer! You provided detailed information that aligns well with your background. Consider being even more specific with metrics or outcomes."
FEEDBACK_LONG_GENERIC: str = "You gave a comprehensive answer. Make sure to tie your responses more directly to specific experiences from your resume."
