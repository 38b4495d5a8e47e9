"""Question routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import AliasChoices, BaseModel, Field

from agora.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    PostQuestionRequest,
    PostQuestionUseCase,
    QuestionResponse,
)
from agora.config import QuestionSettings
from agora.domain.error import DomainError
from agora.domain.value import Subject
from agora.interface.error import invalid_request, to_http_exception

router = APIRouter(
    prefix="/api/questions", tags=["questions"], route_class=DishkaRoute
)


class PostQuestionAPIRequest(BaseModel):
    """API request for posting a question."""

    wallet_address: str = Field(
        validation_alias=AliasChoices("walletAddress", "wallet_address")
    )
    content: str = Field(min_length=1, max_length=10000)
    subject: Subject


@router.post(
    "", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED
)
async def post_question(
    request: PostQuestionAPIRequest,
    post_question_use_case: FromDishka[PostQuestionUseCase],
) -> QuestionResponse:
    """Post a question to the community.

    Raises:
        HTTPException: 404 if the wallet has no account, 400 on bad content
    """
    try:
        return await post_question_use_case.execute(
            PostQuestionRequest(
                wallet_address=request.wallet_address,
                content=request.content,
                subject=request.subject,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise invalid_request(str(e))


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    question_settings: FromDishka[QuestionSettings],
    subject: Subject | None = None,
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListQuestionsResponse:
    """List questions newest first, optionally filtered by subject."""
    if limit is None:
        limit = question_settings.default_page_size
    limit = min(limit, question_settings.max_page_size)

    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(subject=subject, limit=limit, offset=offset)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> QuestionResponse:
    """Get a single question.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(question_id=question_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
