"""路由公共依赖"""

from fastapi import HTTPException


def resolve_id(raw: str, name: str = "id") -> int:
    """解析路径中的整数 ID

    前端模板未替换的占位符（如字面量 {order_id}）返回 400，其余非法值同样返回 400。
    """
    if raw.startswith("{") and raw.endswith("}"):
        raise HTTPException(status_code=400, detail=f"Path contains unresolved placeholder {raw}")
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {name}: {raw}")
