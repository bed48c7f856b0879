import logging
from typing import Any, Dict, List, Optional, TypedDict

from langchain_core.runnables import RunnableConfig
from langgraph.graph import StateGraph, START, END

from ..core.exceptions import MalformedAIResponse
from ..schemas.ats import ResumeUpload
from ..services.operations import Operation
from ..services.prompt_builder import PromptPart, build_prompt_parts
from ..utils.json_extraction import parse_json_payload
from ..utils.response_validation import ensure_required_fields

logger = logging.getLogger(__name__)


class ATSRequestState(TypedDict, total=False):
    operation: Operation
    job_description: str
    resume: ResumeUpload
    prompt_parts: List[PromptPart]
    completion_text: str
    parsed: Dict[str, Any]
    result: Dict[str, Any]


def _gateway(config: Optional[RunnableConfig]):
    gateway = ((config or {}).get("configurable") or {}).get("gateway")
    if gateway is None:
        raise RuntimeError("No AI gateway configured for this run")
    return gateway


### Nodes ###

def build_prompt_node(state: ATSRequestState) -> Dict[str, Any]:
    parts = build_prompt_parts(
        state["operation"],
        state["job_description"],
        state["resume"],
    )
    return {"prompt_parts": parts}


def call_model_node(state: ATSRequestState, config: RunnableConfig) -> Dict[str, Any]:
    text = _gateway(config).generate(state["prompt_parts"])
    return {"completion_text": text}


def extract_json_node(state: ATSRequestState) -> Dict[str, Any]:
    try:
        parsed = parse_json_payload(state["completion_text"])
    except MalformedAIResponse:
        logger.warning(
            f"[{state['operation'].name}] Could not extract JSON from completion "
            f"({len(state['completion_text'])} chars)"
        )
        raise
    return {"parsed": parsed}


def validate_result_node(state: ATSRequestState) -> Dict[str, Any]:
    operation = state["operation"]
    parsed = ensure_required_fields(state["parsed"], operation.required_fields)

    if operation.response_fields is None:
        result = parsed
    else:
        result = {name: parsed[name] for name in operation.response_fields}
    return {"result": result}


### Graph Construction ###

workflow = StateGraph(ATSRequestState)

workflow.add_node("build_prompt", build_prompt_node)
workflow.add_node("call_model", call_model_node)
workflow.add_node("extract_json", extract_json_node)
workflow.add_node("validate_result", validate_result_node)

workflow.add_edge(START, "build_prompt")
workflow.add_edge("build_prompt", "call_model")
workflow.add_edge("call_model", "extract_json")
workflow.add_edge("extract_json", "validate_result")
workflow.add_edge("validate_result", END)

# No checkpointer: nothing about a request outlives it.
ats_workflow = workflow.compile()


def build_ats_graph():
    """
    Return the compiled ATS pipeline graph.
    Routes and services must never construct graphs directly.
    """
    return ats_workflow
