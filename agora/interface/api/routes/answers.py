"""Answer routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import AliasChoices, BaseModel, Field

from agora.application.usecase.answer import (
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    PostAnswerRequest,
    PostAnswerResponse,
    PostAnswerUseCase,
)
from agora.domain.error import DomainError
from agora.interface.error import invalid_request, to_http_exception

router = APIRouter(
    prefix="/api/questions", tags=["answers"], route_class=DishkaRoute
)


class PostAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    wallet_address: str = Field(
        validation_alias=AliasChoices("walletAddress", "wallet_address")
    )
    content: str = Field(min_length=1, max_length=10000)


@router.post(
    "/{question_id}/answers",
    response_model=PostAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_answer(
    question_id: str,
    request: PostAnswerAPIRequest,
    post_answer_use_case: FromDishka[PostAnswerUseCase],
) -> PostAnswerResponse:
    """Answer a question.

    Raises:
        HTTPException: 404 if the wallet or question is unknown
    """
    try:
        return await post_answer_use_case.execute(
            PostAnswerRequest(
                question_id=question_id,
                wallet_address=request.wallet_address,
                content=request.content,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise invalid_request(str(e))


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: str,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    wallet_address: str | None = Query(default=None, alias="walletAddress"),
) -> ListAnswersResponse:
    """List a question's answers with vote counts.

    When ``walletAddress`` is given, each answer also reports whether that
    wallet has voted on it.
    """
    try:
        return await list_answers_use_case.execute(
            ListAnswersRequest(question_id=question_id, wallet_address=wallet_address)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise invalid_request(str(e))
