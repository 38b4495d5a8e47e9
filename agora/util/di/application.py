"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.answer import ListAnswersUseCase, PostAnswerUseCase
from agora.application.usecase.question import (
    GetQuestionUseCase,
    ListQuestionsUseCase,
    PostQuestionUseCase,
)
from agora.application.usecase.user import ConnectUserUseCase, GetUserUseCase
from agora.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteCountUseCase,
    RetractVoteUseCase,
)
from agora.domain.service import (
    AnswerService,
    QuestionService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_connect_user_use_case(
        self, user_service: UserService
    ) -> ConnectUserUseCase:
        """Provide connect user use case."""
        return ConnectUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_post_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> PostQuestionUseCase:
        """Provide post question use case."""
        return PostQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_post_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
            vote_service=vote_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_retract_vote_use_case(
        self, vote_service: VoteService
    ) -> RetractVoteUseCase:
        """Provide retract vote use case."""
        return RetractVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_get_vote_count_use_case(
        self, vote_service: VoteService
    ) -> GetVoteCountUseCase:
        """Provide get vote count use case."""
        return GetVoteCountUseCase(vote_service=vote_service)
