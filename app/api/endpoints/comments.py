# comment-board/app/api/endpoints/comments.py
"""
コメント リソース（HTML）
- 一覧（管理者のコメントのみ・新着順）・詳細
- 新規作成・編集・削除
成功時はフラッシュを積んで 303 リダイレクト、バリデーション失敗時はフォームを再表示する。
"""

from typing import Any, Mapping

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.core.errors import ParameterMissing, RecordInvalid
from app.core.flash import flash
from app.core.logger import get_logger
from app.core.templating import render
from app.db import models
from app.db.database import get_db
from app.repositories.comment_repository import CommentRepository
from app.schemas.comment import PARAM_KEY, CommentParams, bind_comment_params

router = APIRouter()

logger = get_logger(__name__)


# =============================================================================
# 依存関係
# =============================================================================

async def read_request_data(request: Request) -> Mapping[str, Any]:
    """リクエストボディを読み込む（JSON またはフォーム）"""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise ParameterMissing(PARAM_KEY)
        if not isinstance(data, dict):
            raise ParameterMissing(PARAM_KEY)
        return data
    return await request.form()


def comment_params(data: Mapping[str, Any] = Depends(read_request_data)) -> CommentParams:
    """許可リスト（content, user_id）に従ってパラメータを取り出す"""
    return bind_comment_params(data)


def get_comment_repository(db: Session = Depends(get_db)) -> CommentRepository:
    return CommentRepository(db)


def _redirect(request: Request, route_name: str, **path_params) -> RedirectResponse:
    # POST後は GET で遷移させる（再送信を防ぐ）
    return RedirectResponse(
        url=str(request.url_for(route_name, **path_params)),
        status_code=status.HTTP_303_SEE_OTHER,
    )


# =============================================================================
# 一覧・詳細
# =============================================================================

@router.get("", name="list_comments", summary="コメント一覧")
def list_comments(
    request: Request,
    repo: CommentRepository = Depends(get_comment_repository),
):
    """管理者ユーザーのコメントを新着順で表示"""
    comments = repo.list_admin_comments()
    return render(request, "comments/index.html", {"comments": comments})


@router.get("/new", name="new_comment", summary="コメント作成フォーム")
def new_comment(request: Request):
    return render(
        request, "comments/new.html", {"comment": models.Comment(), "errors": {}}
    )


@router.get("/{comment_id}", name="show_comment", summary="コメント詳細")
def show_comment(
    comment_id: int,
    request: Request,
    repo: CommentRepository = Depends(get_comment_repository),
):
    comment = repo.find(comment_id)
    return render(request, "comments/show.html", {"comment": comment})


@router.get("/{comment_id}/edit", name="edit_comment", summary="コメント編集フォーム")
def edit_comment(
    comment_id: int,
    request: Request,
    repo: CommentRepository = Depends(get_comment_repository),
):
    comment = repo.find(comment_id)
    return render(request, "comments/edit.html", {"comment": comment, "errors": {}})


# =============================================================================
# 作成・更新・削除
# =============================================================================

@router.post("", name="create_comment", summary="コメント投稿")
def create_comment(
    request: Request,
    params: CommentParams = Depends(comment_params),
    repo: CommentRepository = Depends(get_comment_repository),
):
    """保存に成功したら詳細へ、失敗したら入力内容を保ったままフォームを再表示"""
    comment = models.Comment(**params.model_dump())
    try:
        repo.save(comment)
    except RecordInvalid as e:
        logger.warning(f"コメント作成を拒否: {e}")
        return render(
            request, "comments/new.html", {"comment": comment, "errors": e.errors}
        )

    logger.info(f"コメント作成: id={comment.id} user_id={comment.user_id}")
    flash(request, "Successfully created comment.")
    return _redirect(request, "show_comment", comment_id=comment.id)


def _update(
    request: Request, comment_id: int, params: CommentParams, repo: CommentRepository
):
    comment = repo.find(comment_id)
    # 許可された全フィールドを置き換える（未指定は None）
    for field, value in params.model_dump().items():
        setattr(comment, field, value)

    try:
        repo.save(comment)
    except RecordInvalid as e:
        logger.warning(f"コメント更新を拒否: id={comment_id} {e}")
        return render(
            request, "comments/edit.html", {"comment": comment, "errors": e.errors}
        )

    logger.info(f"コメント更新: id={comment.id}")
    flash(request, "Successfully updated comment.")
    return _redirect(request, "show_comment", comment_id=comment.id)


def _destroy(request: Request, comment_id: int, repo: CommentRepository):
    comment = repo.find(comment_id)
    repo.delete(comment)

    logger.info(f"コメント削除: id={comment_id}")
    flash(request, "Successfully destroyed comment.")
    return _redirect(request, "list_comments")


@router.patch("/{comment_id}", name="update_comment", summary="コメント更新")
@router.put("/{comment_id}", summary="コメント更新")
def update_comment(
    comment_id: int,
    request: Request,
    params: CommentParams = Depends(comment_params),
    repo: CommentRepository = Depends(get_comment_repository),
):
    return _update(request, comment_id, params, repo)


@router.delete("/{comment_id}", name="destroy_comment", summary="コメント削除")
def destroy_comment(
    comment_id: int,
    request: Request,
    repo: CommentRepository = Depends(get_comment_repository),
):
    return _destroy(request, comment_id, repo)


@router.post("/{comment_id}", summary="HTMLフォームからの更新・削除")
def override_method(
    comment_id: int,
    request: Request,
    data: Mapping[str, Any] = Depends(read_request_data),
    repo: CommentRepository = Depends(get_comment_repository),
):
    """HTMLフォームは GET/POST しか送れないため、_method で PATCH/PUT/DELETE を指定する"""
    method = str(data.get("_method") or "").lower()
    if method in ("patch", "put"):
        return _update(request, comment_id, bind_comment_params(data), repo)
    if method == "delete":
        return _destroy(request, comment_id, repo)
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Unsupported _method",
    )
