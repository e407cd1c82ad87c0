"""アーキテクチャ図の構造ルール評価ロジック。"""

import logging
from collections.abc import Sequence

from systemcraft.models.evaluation import RuleResult, StructuralEvaluation
from systemcraft.models.graph import Connection, Node
from systemcraft.models.rule import CheckResult, Rule
from systemcraft.scoring.rounding import round_half_up

logger = logging.getLogger(__name__)

# ルール判定で参照するコンポーネント種別
LOAD_BALANCER_TYPES: frozenset[str] = frozenset({"LB"})
DATABASE_TYPES: frozenset[str] = frozenset({"SQL", "Blob"})
COMPUTE_TYPES: frozenset[str] = frozenset({"Server", "Function"})
CACHE_TYPES: frozenset[str] = frozenset({"Cache", "CDN"})
QUEUE_TYPES: frozenset[str] = frozenset({"Queue", "Kafka"})

# キャッシュ層が必要と判断する要件中のキーワード（小文字で部分一致）
_HIGH_LOAD_KEYWORDS: tuple[str, ...] = ("scale", "latency")


def _has_type(nodes: Sequence[Node], types: frozenset[str]) -> bool:
    return any(n.type in types for n in nodes)


def _is_connected_to(
    nodes: Sequence[Node],
    connections: Sequence[Connection],
    source_types: frozenset[str],
    target_types: frozenset[str],
) -> bool:
    """source_types のいずれかのノードが target_types のノードと接続されているか判定する。

    接続の向きは問わない。存在しないノードIDを指す接続は一致なしとして扱う。
    """
    # 同一IDが重複する場合は先頭のノードを採用する
    node_map: dict[str, Node] = {}
    for node in nodes:
        node_map.setdefault(node.id, node)

    for node in nodes:
        if node.type not in source_types:
            continue
        for conn in connections:
            if conn.source == node.id:
                other_id = conn.target
            elif conn.target == node.id:
                other_id = conn.source
            else:
                continue
            other = node_map.get(other_id)
            if other is not None and other.type in target_types:
                return True
    return False


def _check_load_balancer(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if _has_type(nodes, LOAD_BALANCER_TYPES):
        return CheckResult(passed=True, message="Load balancer correctly identified")
    return CheckResult(passed=False, message="Missing a Load Balancer to distribute traffic between servers.")


def _check_database(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if _has_type(nodes, DATABASE_TYPES):
        return CheckResult(passed=True, message="Storage layer present")
    return CheckResult(passed=False, message="Missing a persistent storage layer (SQL or Blob storage).")


def _check_application_server(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if _has_type(nodes, COMPUTE_TYPES):
        return CheckResult(passed=True, message="Application logic layer present")
    return CheckResult(passed=False, message="Missing application servers or functions to process business logic.")


def _check_lb_connected_to_servers(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if not _has_type(nodes, LOAD_BALANCER_TYPES):
        return CheckResult(passed=False, message="No Load Balancer to check connections.")
    if _is_connected_to(nodes, connections, LOAD_BALANCER_TYPES, COMPUTE_TYPES):
        return CheckResult(passed=True, message="Traffic flows from Load Balancer to servers")
    return CheckResult(passed=False, message="Load Balancer is not connected to any application servers.")


def _check_servers_connected_to_db(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if not _has_type(nodes, COMPUTE_TYPES):
        return CheckResult(passed=False, message="No servers to check connections.")
    if _is_connected_to(nodes, connections, COMPUTE_TYPES, DATABASE_TYPES):
        return CheckResult(passed=True, message="Servers are correctly connected to storage")
    return CheckResult(passed=False, message="Application logic is not connected to any database or storage.")


def _check_caching_layer(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if _has_type(nodes, CACHE_TYPES):
        return CheckResult(passed=True, message="Caching layer used for performance optimization.")
    mentions_high_load = any(keyword in r.lower() for r in requirements for keyword in _HIGH_LOAD_KEYWORDS)
    if mentions_high_load:
        return CheckResult(
            passed=False, message="High performance requirements detected. Consider adding a Cache or CDN."
        )
    return CheckResult(passed=True, message="Simple design: Caching not strictly required but recommended.")


def _check_asynchronous_processing(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if _has_type(nodes, QUEUE_TYPES):
        return CheckResult(passed=True, message="Async processing used for decoupled architecture")
    return CheckResult(
        passed=False, message="Consider using a Message Queue for long-running or non-blocking tasks."
    )


def _check_no_orphan_nodes(
    nodes: Sequence[Node], connections: Sequence[Connection], requirements: Sequence[str], constraints: Sequence[str]
) -> CheckResult:
    if not nodes:
        return CheckResult(passed=True, message="Empty canvas")

    connected_ids: set[str] = set()
    for conn in connections:
        connected_ids.add(conn.source)
        connected_ids.add(conn.target)

    orphan_count = sum(1 for n in nodes if n.id not in connected_ids)
    if orphan_count == 0:
        return CheckResult(passed=True, message="Architecture is fully connected")
    return CheckResult(
        passed=False, message=f"{orphan_count} component(s) are floating and not connected to the system."
    )


RULES: tuple[Rule, ...] = (
    # コンポーネントの存在
    Rule(
        id="has_load_balancer",
        description="Design includes a Load Balancer",
        weight=15,
        severity="critical",
        check=_check_load_balancer,
    ),
    Rule(
        id="has_database",
        description="Design includes a Database",
        weight=15,
        severity="critical",
        check=_check_database,
    ),
    Rule(
        id="has_application_server",
        description="Design includes Application Servers",
        weight=15,
        severity="critical",
        check=_check_application_server,
    ),
    # 接続関係
    Rule(
        id="lb_connected_to_servers",
        description="Load Balancer connects to Servers",
        weight=10,
        severity="warning",
        check=_check_lb_connected_to_servers,
    ),
    Rule(
        id="servers_connected_to_db",
        description="Servers connect to Database",
        weight=10,
        severity="warning",
        check=_check_servers_connected_to_db,
    ),
    # 性能・スケーラビリティ
    Rule(
        id="caching_layer",
        description="Includes Caching for performance",
        weight=10,
        severity="info",
        check=_check_caching_layer,
    ),
    Rule(
        id="asynchronous_processing",
        description="Uses Queues for async tasks",
        weight=10,
        severity="info",
        check=_check_asynchronous_processing,
    ),
    # グラフ全体の健全性
    Rule(
        id="no_orphan_nodes",
        description="All components are connected",
        weight=10,
        severity="warning",
        check=_check_no_orphan_nodes,
    ),
)


def evaluate_structure(
    nodes: Sequence[Node],
    connections: Sequence[Connection],
    requirements: Sequence[str],
    constraints: Sequence[str],
    rules: Sequence[Rule] = RULES,
) -> StructuralEvaluation:
    """アーキテクチャ図を構造ルールに基づいて採点する。

    全ルールは同じ入力に対して独立に評価される。スコアは合格ルールの重みの合計を
    全ルールの重みの合計で割った百分率（四捨五入）。

    Args:
        nodes: 配置されたコンポーネント。
        connections: コンポーネント間の接続。
        requirements: 設問の機能要件。
        constraints: 設問の規模・性能制約。
        rules: 適用するルール。省略時は標準ルール。

    Returns:
        ルールごとの判定結果を含む構造評価。
    """
    details: list[RuleResult] = []
    total_weight = 0.0
    earned_weight = 0.0

    for rule in rules:
        outcome = rule.check(nodes, connections, requirements, constraints)
        details.append(
            RuleResult(
                rule=rule.description,
                status="pass" if outcome.passed else "fail",
                message=outcome.message,
                severity=rule.severity,
            )
        )
        total_weight += rule.weight
        if outcome.passed:
            earned_weight += rule.weight

    score = round_half_up(earned_weight / total_weight * 100) if total_weight > 0 else 0
    logger.debug("Structural score %d (%s/%s weight earned)", score, earned_weight, total_weight)

    return StructuralEvaluation(
        score=score,
        passed_rules=[d.rule for d in details if d.status == "pass"],
        failed_rules=[d.rule for d in details if d.status == "fail"],
        details=details,
    )
