"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
bootstrap()으로 플러그인을 등록한 뒤 레지스트리/액션 레이어만 사용합니다.

명령어 구조:
    awsb services                               # 카테고리별 서비스 목록
    awsb resources <service>                    # 서비스의 리소스 타입
    awsb list <service> [resource]              # 리소스 목록
    awsb show <service> <resource> <id>         # 상세 화면
    awsb actions <service> <resource>           # 액션 목록
    awsb run <service> <resource> <id> <key>    # 액션 실행
    awsb search <query>                         # 서비스/리소스 검색

    예시:
    awsb list ec2
    awsb list cloudwatch log-streams -f LogGroupName=/aws/lambda/app --page-size 20
    awsb --read-only run cfn stacks my-stack d

전역 옵션:
    --profile / --region : 자격 증명/리전 (설정 파일과 환경변수를 덮어씀)
    --read-only          : 허용 목록 밖의 액션 차단
    --demo               : 상세 화면 태그 숨김
    --debug              : Rich 핸들러로 DEBUG 로그 출력
    --lang               : UI 언어 (ko, en)
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

import click
from botocore.exceptions import BotoCoreError, ClientError
from click import Context
from rich.table import Table

from cli.i18n import t
from cli.ui import configure_logging, confirm_action, console, print_error, print_info, print_success, print_warning
from core.action import (
    Action,
    ActionRegistry,
    ActionResult,
    ConfirmLevel,
    execute_with_dao,
    find_action,
    is_allowed_in_read_only,
    precheck_action,
)
from core.bootstrap import bootstrap
from core.config import RuntimeConfig, get_version, set_runtime_config
from core.context import RequestContext
from core.dao import Operation, ensure_supported, is_paginated
from core.exceptions import BrowserError, ConfigError, ErrorKind, NotFoundError, classify_error
from core.registry import Registry
from core.render import build_table, metric_spec_for, navigations_for

logger = logging.getLogger(__name__)

VERSION = get_version()


# =============================================================================
# 공통 헬퍼
# =============================================================================


def _error_hint(error: BaseException) -> str:
    kind = classify_error(error)
    if kind == ErrorKind.OTHER:
        return ""
    return t(f"common.error_{kind.value}")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """BrowserError/botocore 예외를 에러 메시지 + 종료 코드 1로 변환"""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (BrowserError, ClientError, BotoCoreError) as e:
            logger.debug(f"명령 실패: {e!r}")
            print_error(str(e))
            hint = _error_hint(e)
            if hint:
                console.print(f"[dim]{hint}[/dim]")
            raise SystemExit(1) from e

    return wrapper


def _registries() -> tuple[Registry, ActionRegistry]:
    return bootstrap()


def _request_context(ctx: Context, filters: tuple[str, ...] = ()) -> RequestContext:
    """전역 옵션과 --filter 값으로 RequestContext 생성"""
    obj = ctx.find_root().obj
    config: RuntimeConfig = obj["config"]
    factory = obj.get("context_factory") or RequestContext.create
    request = factory(profile=config.profile, region=config.region)

    for item in filters:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(t("cli.invalid_filter", value=item), param_hint="--filter")
        request = request.with_filter(key.strip(), value.strip())
    return request


def _resolve(registry: Registry, service: str, resource: str | None) -> tuple[str, str]:
    sr = registry.resolve(service, resource)
    return sr.service, sr.resource


def _find_resource(dao: Any, request: RequestContext, resource_id: str) -> Any:
    """GET을 지원하면 get, 아니면 list에서 ID로 검색"""
    if dao.supports(Operation.GET):
        return dao.get(request, resource_id)

    ensure_supported(dao, Operation.LIST)
    for item in dao.list(request):
        if item.id == resource_id or item.name == resource_id:
            return item
    raise NotFoundError(f"{dao.service_name}/{dao.resource_type}", resource_id)


def _help_text() -> str:
    lines = [
        "awsb - AWS Resource Browser",
        "",
        t("cli.help_intro"),
        "",
        "\b",  # Click 줄바꿈 유지 마커
        "  awsb services",
        "  awsb list ec2",
        "  awsb show ec2 instances i-0123456789abcdef0",
        "  awsb run sqs queues my-queue p",
    ]
    return "\n".join(lines)


# =============================================================================
# 그룹
# =============================================================================


@click.group()
@click.version_option(VERSION, prog_name="awsb")
@click.option("-p", "--profile", default=None, help="AWS 프로파일")
@click.option("-r", "--region", default=None, help="AWS 리전")
@click.option("--read-only", "read_only", is_flag=True, help="읽기 전용 모드 (허용 목록 외 액션 차단)")
@click.option("--demo", "demo", is_flag=True, help="데모 모드 (태그 숨김)")
@click.option("--debug", is_flag=True, help="DEBUG 로그 출력")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default="ko",
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.pass_context
def cli(
    ctx: Context,
    profile: str | None,
    region: str | None,
    read_only: bool,
    demo: bool,
    debug: bool,
    lang: str,
) -> None:
    """awsb - AWS Resource Browser"""
    from cli.i18n import set_lang

    set_lang(lang)
    configure_logging(debug)

    try:
        config = RuntimeConfig.load()
        config.apply(
            {
                "profile": profile,
                "region": region,
                "read_only": True if read_only else None,
                "demo_mode": True if demo else None,
            }
        )
    except ConfigError as e:
        print_error(t("cli.config_error", error=e))
        raise SystemExit(1) from e
    set_runtime_config(config)

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["config"] = config

    if config.read_only:
        console.print(f"[yellow]{t('cli.read_only_banner')}[/yellow]")


cli.help = _help_text()


# =============================================================================
# 조회 명령어
# =============================================================================


@cli.command("services")
@handle_errors
def services_command() -> None:
    """카테고리별 서비스 목록"""
    registry, _ = _registries()

    table = Table(title=t("cli.services_title"), show_header=True, header_style="bold magenta")
    table.add_column(t("cli.col_category"), style="cyan")
    table.add_column(t("cli.col_service"))
    table.add_column(t("cli.col_display"))
    table.add_column(t("cli.col_resources"), style="dim")

    for category in registry.list_services_by_category():
        for service in category.services:
            table.add_row(
                category.name,
                service,
                registry.display_name(service),
                ", ".join(registry.list_resources(service)),
            )
    console.print(table)


@cli.command("resources")
@click.argument("service")
@handle_errors
def resources_command(service: str) -> None:
    """서비스의 리소스 타입 목록"""
    registry, _ = _registries()
    service, _, _ = registry.resolve_alias(service)
    resources = registry.list_resources(service)
    if not resources:
        print_error(t("cli.unknown_service", service=service))
        raise SystemExit(1)

    default = registry.default_resource(service)
    table = Table(title=t("cli.resources_title", service=registry.display_name(service)), header_style="bold magenta")
    table.add_column(t("cli.col_resource"), style="cyan")
    table.add_column(t("cli.col_default"))
    for resource in resources:
        table.add_row(resource, "*" if resource == default else "")
    console.print(table)

    aliases = registry.aliases_for_service(service)
    if aliases:
        console.print(f"[dim]{t('cli.col_aliases')}: {', '.join(aliases)}[/dim]")


@cli.command("list")
@click.argument("service")
@click.argument("resource", required=False)
@click.option("-f", "--filter", "filters", multiple=True, help="KEY=VALUE 필터 (다중 가능)")
@click.option("--page-size", type=int, default=None, help="페이지 크기 (페이지 조회 지원 리소스)")
@click.option("--page-token", default="", help="다음 페이지 토큰")
@click.pass_context
@handle_errors
def list_command(
    ctx: Context,
    service: str,
    resource: str | None,
    filters: tuple[str, ...],
    page_size: int | None,
    page_token: str,
) -> None:
    """리소스 목록

    \b
    Examples:
        awsb list ec2
        awsb list cfn resources -f StackName=my-stack
        awsb list cloudwatch log-streams -f LogGroupName=/app --page-size 20
    """
    registry, _ = _registries()
    service, resource = _resolve(registry, service, resource)
    request = _request_context(ctx, filters)
    dao = registry.get_dao(request, service, resource)
    renderer = registry.get_renderer(service, resource)

    next_token = ""
    paging = page_size is not None or bool(page_token)
    if paging and is_paginated(dao):
        size = page_size or ctx.find_root().obj["config"].page_size
        items, next_token = dao.list_page(request, size, page_token)
    else:
        if paging:
            print_warning(t("cli.page_not_supported", key=f"{service}/{resource}"))
        ensure_supported(dao, Operation.LIST)
        items = dao.list(request)

    if not items:
        print_info(t("cli.list_empty"))
        return

    console.print(build_table(renderer, items, width=console.width))
    console.print(f"[dim]{t('cli.list_count', count=len(items))}[/dim]")
    if next_token:
        console.print(f"[dim]{t('cli.next_page_token', token=next_token)}[/dim]")


@cli.command("show")
@click.argument("service")
@click.argument("resource")
@click.argument("resource_id")
@click.option("-f", "--filter", "filters", multiple=True, help="KEY=VALUE 필터 (다중 가능)")
@click.pass_context
@handle_errors
def show_command(ctx: Context, service: str, resource: str, resource_id: str, filters: tuple[str, ...]) -> None:
    """리소스 상세"""
    registry, _ = _registries()
    service, resource = _resolve(registry, service, resource)
    request = _request_context(ctx, filters)
    dao = registry.get_dao(request, service, resource)
    renderer = registry.get_renderer(service, resource)

    item = _find_resource(dao, request, resource_id)

    summary = "  ".join(f"[dim]{f.label}:[/dim] {f.value}" for f in renderer.render_summary(item) if f.value)
    if summary:
        console.print(summary)
        console.print()

    console.print(renderer.render_detail(item) or f"{item.id}\n")

    navigations = [n for n in navigations_for(renderer, item) if registry.has_resource(n.service, n.resource)]
    if navigations:
        console.print(f"[bold cyan]{t('cli.navigations_title')}[/bold cyan]")
        for nav in navigations:
            console.print(
                f"  [cyan]{nav.key}[/cyan] {nav.label} → {nav.service}/{nav.resource} "
                f"[dim]({nav.filter_field}={nav.filter_value})[/dim]"
            )

    spec = metric_spec_for(renderer)
    if spec is not None:
        console.print(
            f"[dim]{t('cli.metric_hint', namespace=spec.namespace, metric=spec.metric_name, stat=spec.stat)}[/dim]"
        )


@cli.command("actions")
@click.argument("service")
@click.argument("resource", required=False)
@handle_errors
def actions_command(service: str, resource: str | None) -> None:
    """리소스 타입에 등록된 액션 목록"""
    registry, action_registry = _registries()
    service, resource = _resolve(registry, service, resource)
    key = f"{service}/{resource}"

    actions = action_registry.get(service, resource)
    if not actions:
        print_info(t("cli.no_actions", key=key))
        return

    table = Table(title=t("cli.actions_title", key=key), header_style="bold magenta")
    table.add_column(t("cli.col_shortcut"), style="cyan")
    table.add_column(t("cli.col_name"))
    table.add_column(t("cli.col_type"))
    table.add_column(t("cli.col_confirm"))
    table.add_column(t("cli.col_read_only"))
    for action in actions:
        table.add_row(
            action.shortcut,
            action.name,
            action.type.value,
            action.confirm.name.lower(),
            t("common.yes") if is_allowed_in_read_only(action) else "",
        )
    console.print(table)


@cli.command("search")
@click.argument("query")
@click.option("-n", "--limit", type=int, default=10, help="최대 결과 수")
@handle_errors
def search_command(query: str, limit: int) -> None:
    """서비스/리소스/별칭 검색 (fuzzy)"""
    registry, _ = _registries()
    hits = registry.search(query, limit=limit)
    if not hits:
        print_info(t("cli.search_empty", query=query))
        return

    table = Table(title=t("cli.search_title", query=query), header_style="bold magenta")
    table.add_column(t("cli.col_service"), style="cyan")
    table.add_column(t("cli.col_resource"))
    table.add_column(t("cli.col_match"), style="dim")
    table.add_column(t("cli.col_score"), justify="right")
    for hit in hits:
        table.add_row(hit.service, hit.resource, hit.match_type, f"{hit.score:.2f}")
    console.print(table)


# =============================================================================
# 액션 실행
# =============================================================================


@cli.command("run")
@click.argument("service")
@click.argument("resource")
@click.argument("resource_id")
@click.argument("shortcut")
@click.option("-f", "--filter", "filters", multiple=True, help="KEY=VALUE 필터 (다중 가능)")
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="단순 확인 생략 (위험 액션은 생략 불가)")
@click.option("--confirm", "typed_token", default=None, help="위험 액션 확인 문자열 (비대화형)")
@click.pass_context
@handle_errors
def run_command(
    ctx: Context,
    service: str,
    resource: str,
    resource_id: str,
    shortcut: str,
    filters: tuple[str, ...],
    assume_yes: bool,
    typed_token: str | None,
) -> None:
    """리소스에 액션 실행

    \b
    Examples:
        awsb run ec2 instances i-0123456789abcdef0 S
        awsb run ec2 instances i-0123456789abcdef0 D --confirm bcdef0
        awsb run local profile dev l
    """
    registry, action_registry = _registries()
    service, resource = _resolve(registry, service, resource)
    request = _request_context(ctx, filters)

    action = find_action(action_registry.get(service, resource) or [], shortcut)
    if action is None:
        print_error(t("cli.action_not_found", shortcut=shortcut))
        raise SystemExit(1)

    dao = registry.get_dao(request, service, resource)
    item = _find_resource(dao, request, resource_id)

    if not action.applies_to(item):
        print_error(t("cli.action_not_applicable", action=action.name))
        raise SystemExit(1)

    refused = precheck_action(action, f"{service}/{resource}")
    if refused is not None:
        _fail_action(action, refused)

    if not confirm_action(action, item, assume_yes=assume_yes, typed_token=typed_token):
        print_warning(t("cli.confirm_mismatch") if action.confirm == ConfirmLevel.DANGEROUS else t("common.cancelled"))
        raise SystemExit(1)

    result = execute_with_dao(request, action, item, service, resource, registry=action_registry)
    if result.success:
        print_success(result.message)
        return

    _fail_action(action, result)


def _fail_action(action: Action, result: ActionResult) -> None:
    """실패 결과 출력 후 종료 코드 1"""
    print_error(t("cli.action_failed", action=action.name, error=result.message or result.error))
    if result.error is not None:
        hint = _error_hint(result.error)
        if hint:
            console.print(f"[dim]{hint}[/dim]")
    raise SystemExit(1)


if __name__ == "__main__":
    cli()
