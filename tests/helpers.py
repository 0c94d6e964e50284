def comment_form(content=None, user_id=None, **extra):
    """comment[xxx] 形式のフォームデータを作る"""
    data = {}
    if content is not None:
        data["comment[content]"] = content
    if user_id is not None:
        data["comment[user_id]"] = str(user_id)
    for key, value in extra.items():
        data[key] = str(value)
    return data
