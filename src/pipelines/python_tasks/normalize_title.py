def transform(row):
    d = dict(row)
    if d.get("title"):
        d["title"] = d["title"].strip().title()
    return d
